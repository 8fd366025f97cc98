"""Airline designators accepted as flight-number prefixes.

Only all-letter designators: IATA codes containing a digit (U2, B6) cannot be
told apart from flight numbers and are left out.
"""

AIRLINE_CODES = frozenset({
    # IATA
    "AA", "AC", "AF", "AI", "AM", "AR", "AS", "AV", "AY", "AZ",
    "BA", "BR", "CA", "CI", "CM", "CX", "CZ", "DL", "EI", "EK",
    "ET", "EY", "FI", "FR", "GA", "HA", "IB", "JL", "KE", "KL",
    "KQ", "LA", "LH", "LO", "LX", "LY", "MH", "MS", "MU", "NH",
    "NK", "NZ", "OS", "OZ", "PR", "QF", "QR", "RJ", "SA", "SK",
    "SN", "SQ", "SU", "SV", "TG", "TK", "TP", "UA", "UX", "VA",
    "VN", "VS", "VY", "WN", "WS", "WY", "DY", "EW", "PC", "JQ",
    "TR", "AK", "MF", "HU", "ZH", "FM", "HX", "KA", "OU", "JU",
    # ICAO
    "AAL", "ACA", "AFR", "AUA", "BAW", "CPA", "DAL", "DLH", "EIN",
    "EZY", "ETD", "FIN", "IBE", "JAL", "KLM", "QFA", "QTR", "RYR",
    "SAS", "SIA", "SWR", "TAP", "THY", "UAE", "UAL", "VIR", "VLG",
    "WZZ", "ANA", "ASA", "JBU", "SWA",
})
