"""Place names (cities, islands, regions) -> ISO 3166-1 alpha-2 country codes.

Keys of two characters or fewer are regional shorthand stored in uppercase and
matched case-sensitively; every other key is lowercase and matched without
regard to case or diacritics.
"""

CITY_TO_COUNTRY = {
    # United States
    "new york": "US", "nyc": "US", "los angeles": "US", "LA": "US", "chicago": "US",
    "houston": "US", "phoenix": "US", "philadelphia": "US", "philly": "US",
    "san antonio": "US", "san diego": "US", "dallas": "US", "san jose ca": "US",
    "austin": "US", "seattle": "US", "denver": "US", "boston": "US",
    "las vegas": "US", "vegas": "US", "miami": "US", "atlanta": "US",
    "san francisco": "US", "SF": "US", "washington": "US", "DC": "US",
    "orlando": "US", "honolulu": "US", "portland": "US", "nashville": "US",
    "new orleans": "US", "salt lake city": "US", "palm springs": "US", "sedona": "US",
    "usa": "US",

    # Canada
    "toronto": "CA", "montreal": "CA", "vancouver": "CA", "calgary": "CA",
    "ottawa": "CA", "edmonton": "CA", "quebec": "CA",

    # United Kingdom
    "london": "GB", "manchester": "GB", "birmingham": "GB", "edinburgh": "GB",
    "glasgow": "GB", "liverpool": "GB", "bristol": "GB", "leeds": "GB",
    "newcastle": "GB", "belfast": "GB", "cardiff": "GB", "oxford": "GB",
    "cambridge": "GB", "brighton": "GB", "bath": "GB", "york": "GB",
    "inverness": "GB", "nottingham": "GB",
    "england": "GB", "scotland": "GB", "wales": "GB", "northern ireland": "GB",
    "UK": "GB",

    # France & Monaco
    "paris": "FR", "marseille": "FR", "lyon": "FR", "toulouse": "FR",
    "nice": "FR", "nantes": "FR", "strasbourg": "FR", "bordeaux": "FR",
    "lille": "FR", "cannes": "FR", "monaco": "MC",

    # Germany
    "berlin": "DE", "munich": "DE", "frankfurt": "DE", "hamburg": "DE",
    "cologne": "DE", "düsseldorf": "DE", "stuttgart": "DE",
    "dresden": "DE", "leipzig": "DE", "nuremberg": "DE", "karlsruhe": "DE",
    "erlangen": "DE", "bamberg": "DE",

    # Italy
    "rome": "IT", "milan": "IT", "naples": "IT", "turin": "IT", "florence": "IT",
    "venice": "IT", "bologna": "IT", "genoa": "IT", "palermo": "IT",
    "verona": "IT", "pisa": "IT", "siena": "IT", "amalfi": "IT", "capri": "IT",
    "messina": "IT",

    # Spain
    "madrid": "ES", "barcelona": "ES", "valencia": "ES", "seville": "ES",
    "bilbao": "ES", "malaga": "ES", "palma": "ES", "mallorca": "ES",
    "palma de mallorca": "ES", "ibiza": "ES", "tenerife": "ES", "granada": "ES",
    "san sebastian": "ES", "fuerteventura": "ES", "lanzarote": "ES",
    "santiago de compostela": "ES",

    # Portugal
    "lisbon": "PT", "porto": "PT", "faro": "PT", "madeira": "PT", "funchal": "PT",

    # Benelux
    "amsterdam": "NL", "rotterdam": "NL", "hague": "NL", "utrecht": "NL",
    "eindhoven": "NL",
    "brussels": "BE", "antwerp": "BE", "bruges": "BE", "ghent": "BE",

    # Switzerland & Austria
    "zurich": "CH", "geneva": "CH", "basel": "CH", "bern": "CH", "lucerne": "CH",
    "interlaken": "CH", "zermatt": "CH",
    "vienna": "AT", "salzburg": "AT", "innsbruck": "AT", "graz": "AT",

    # Ireland
    "dublin": "IE", "cork": "IE", "galway": "IE",

    # Greece
    "athens": "GR", "thessaloniki": "GR", "santorini": "GR", "mykonos": "GR",
    "crete": "GR", "rhodes": "GR", "corfu": "GR",

    # Turkey
    "istanbul": "TR", "ankara": "TR", "antalya": "TR", "izmir": "TR",
    "bodrum": "TR", "cappadocia": "TR",

    # Nordic countries
    "copenhagen": "DK", "stockholm": "SE", "gothenburg": "SE", "oslo": "NO",
    "bergen": "NO", "helsinki": "FI", "reykjavik": "IS",

    # Central & Eastern Europe
    "prague": "CZ", "budapest": "HU", "warsaw": "PL", "krakow": "PL",
    "bucharest": "RO", "sofia": "BG", "zagreb": "HR", "split": "HR",
    "dubrovnik": "HR", "belgrade": "RS", "ljubljana": "SI", "bratislava": "SK",
    "valletta": "MT",
    "tallinn": "EE", "riga": "LV", "vilnius": "LT",
    "minsk": "BY",

    # Russia & Ukraine
    "moscow": "RU", "st petersburg": "RU", "saint petersburg": "RU",
    "kyiv": "UA", "kiev": "UA", "lviv": "UA", "odessa": "UA",

    # Middle East
    "dubai": "AE", "abu dhabi": "AE", "doha": "QA", "bahrain": "BH",
    "kuwait": "KW", "muscat": "OM", "riyadh": "SA", "jeddah": "SA",
    "tel aviv": "IL", "jerusalem": "IL", "amman": "JO", "petra": "JO",
    "beirut": "LB", "tehran": "IR",

    # Africa
    "cairo": "EG", "luxor": "EG", "aswan": "EG", "hurghada": "EG", "sharm el sheikh": "EG",
    "marrakech": "MA", "casablanca": "MA", "fez": "MA", "tangier": "MA",
    "tunis": "TN", "algiers": "DZ",
    "johannesburg": "ZA", "cape town": "ZA", "durban": "ZA",
    "nairobi": "KE", "mombasa": "KE", "addis ababa": "ET",
    "lagos": "NG", "accra": "GH", "dar es salaam": "TZ", "zanzibar": "TZ",
    "mauritius": "MU", "seychelles": "SC", "madagascar": "MG",

    # Japan
    "tokyo": "JP", "osaka": "JP", "kyoto": "JP", "yokohama": "JP", "nagoya": "JP",
    "fukuoka": "JP", "sapporo": "JP", "hiroshima": "JP", "nara": "JP", "kobe": "JP",
    "narita": "JP",

    # Greater China
    "beijing": "CN", "shanghai": "CN", "guangzhou": "CN", "shenzhen": "CN",
    "chengdu": "CN", "hangzhou": "CN", "xian": "CN", "xi'an": "CN", "guilin": "CN",
    "kunming": "CN", "urumqi": "CN",
    "hong kong": "HK", "macau": "MO",

    # Korea & Taiwan
    "seoul": "KR", "busan": "KR", "jeju": "KR", "incheon": "KR",
    "taipei": "TW", "kaohsiung": "TW",

    # Southeast Asia
    "singapore": "SG", "kuala lumpur": "MY", "penang": "MY", "langkawi": "MY",
    "bangkok": "TH", "phuket": "TH", "chiang mai": "TH", "krabi": "TH", "koh samui": "TH",
    "bali": "ID", "jakarta": "ID", "yogyakarta": "ID", "ubud": "ID",
    "manila": "PH", "cebu": "PH", "boracay": "PH", "palawan": "PH",
    "ho chi minh": "VN", "saigon": "VN", "hanoi": "VN", "da nang": "VN", "hoi an": "VN",
    "phnom penh": "KH", "siem reap": "KH", "angkor": "KH",
    "vientiane": "LA", "luang prabang": "LA",
    "yangon": "MM", "bagan": "MM",

    # South Asia
    "delhi": "IN", "new delhi": "IN", "mumbai": "IN", "bombay": "IN", "bangalore": "IN",
    "bengaluru": "IN", "chennai": "IN", "kolkata": "IN", "calcutta": "IN", "hyderabad": "IN",
    "goa": "IN", "jaipur": "IN", "agra": "IN", "varanasi": "IN", "kerala": "IN",
    "kathmandu": "NP", "colombo": "LK", "dhaka": "BD", "maldives": "MV", "male": "MV",
    "karachi": "PK", "lahore": "PK", "islamabad": "PK",

    # Oceania
    "sydney": "AU", "melbourne": "AU", "brisbane": "AU", "perth": "AU",
    "adelaide": "AU", "gold coast": "AU", "cairns": "AU", "darwin": "AU",
    "auckland": "NZ", "wellington": "NZ", "christchurch": "NZ", "queenstown": "NZ",
    "fiji": "FJ", "tahiti": "PF", "bora bora": "PF",

    # Mexico, Central America & Caribbean
    "mexico city": "MX", "cancun": "MX", "playa del carmen": "MX", "tulum": "MX",
    "guadalajara": "MX", "puerto vallarta": "MX", "cabo": "MX", "los cabos": "MX",
    "holbox": "MX",
    "panama city": "PA", "san jose cr": "CR", "guatemala city": "GT",
    "caye caulker": "BZ",
    "havana": "CU", "santo domingo": "DO", "punta cana": "DO",
    "kingston": "JM", "montego bay": "JM", "nassau": "BS", "aruba": "AW",
    "san juan": "PR", "barbados": "BB", "curacao": "CW", "st maarten": "SX",

    # South America
    "sao paulo": "BR", "rio de janeiro": "BR", "rio": "BR", "brasilia": "BR",
    "salvador": "BR", "recife": "BR", "fortaleza": "BR",
    "buenos aires": "AR", "mendoza": "AR", "iguazu": "AR", "bariloche": "AR",
    "ushuaia": "AR", "patagonia": "AR",
    "santiago": "CL", "valparaiso": "CL", "easter island": "CL",
    "lima": "PE", "cusco": "PE", "machu picchu": "PE", "arequipa": "PE",
    "bogota": "CO", "medellin": "CO", "cartagena": "CO",
    "quito": "EC", "galapagos": "EC", "guayaquil": "EC",
    "caracas": "VE", "la paz": "BO", "uyuni": "BO", "asuncion": "PY",
    "montevideo": "UY",
}
