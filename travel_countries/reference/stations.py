"""Major railway stations -> ISO 3166-1 alpha-2 country codes."""

STATION_TO_COUNTRY = {
    # United Kingdom
    "st pancras": "GB", "st. pancras": "GB", "kings cross": "GB", "king's cross": "GB",
    "paddington": "GB", "euston": "GB", "london waterloo": "GB", "liverpool street": "GB",
    "london victoria": "GB", "edinburgh waverley": "GB", "glasgow central": "GB",
    "manchester piccadilly": "GB", "birmingham new street": "GB",

    # France
    "gare du nord": "FR", "gare de lyon": "FR", "gare de l'est": "FR",
    "gare montparnasse": "FR", "gare saint-lazare": "FR", "gare d'austerlitz": "FR",
    "lyon part-dieu": "FR", "marseille saint-charles": "FR", "lille europe": "FR",

    # Benelux
    "bruxelles-midi": "BE", "brussels midi": "BE", "brussels-south": "BE",
    "bruxelles-central": "BE", "antwerpen-centraal": "BE",
    "amsterdam centraal": "NL", "rotterdam centraal": "NL", "den haag centraal": "NL",
    "schiphol plaza": "NL",

    # Germany
    "berlin hauptbahnhof": "DE", "berlin hbf": "DE", "munchen hbf": "DE",
    "münchen hauptbahnhof": "DE", "frankfurt hbf": "DE", "frankfurt hauptbahnhof": "DE",
    "hamburg hbf": "DE", "köln hbf": "DE", "köln hauptbahnhof": "DE",

    # Switzerland & Austria
    "zurich hb": "CH", "zürich hauptbahnhof": "CH", "genève-cornavin": "CH", "bern bahnhof": "CH",
    "wien hauptbahnhof": "AT", "wien hbf": "AT", "salzburg hbf": "AT",

    # Italy
    "roma termini": "IT", "milano centrale": "IT", "firenze santa maria novella": "IT",
    "venezia santa lucia": "IT", "napoli centrale": "IT", "torino porta nuova": "IT",

    # Spain & Portugal
    "madrid atocha": "ES", "atocha": "ES", "chamartin": "ES", "barcelona sants": "ES",
    "sevilla santa justa": "ES",
    "santa apolonia": "PT", "lisboa oriente": "PT", "porto campanha": "PT",

    # Nordic & Central Europe
    "kobenhavn h": "DK", "copenhagen central": "DK", "stockholm central": "SE",
    "oslo s": "NO", "helsinki central": "FI",
    "praha hlavni nadrazi": "CZ", "budapest keleti": "HU", "warszawa centralna": "PL",

    # North America
    "grand central terminal": "US", "grand central station": "US", "penn station": "US",
    "30th street station": "US", "chicago union station": "US",
    "toronto union station": "CA", "gare centrale": "CA",

    # Asia
    "tokyo station": "JP", "shinjuku station": "JP", "shin-osaka": "JP", "kyoto station": "JP",
    "beijing south": "CN", "shanghai hongqiao": "CN",
    "hong kong west kowloon": "HK", "seoul station": "KR", "hua lamphong": "TH",
}
