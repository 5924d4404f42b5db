"""Bundled locale and currency data.

Same shape as a JSON dataset: ``defaults``, ``locales`` (``f`` format,
``d`` decimal, ``t`` thousand) and ``currencies`` (``s`` symbol). Every key
is the value returned; its list holds the codes that use it.
"""

DEFAULT_DATA = {
    "defaults": {
        "format": "%s%v",
        "decimal": ".",
        "thousand": ",",
        "noSymbolFormat": "%v %s",
    },
    "locales": {
        "f": {
            "%s%v": [
                "en", "en-US", "en-GB", "en-AU", "en-CA", "en-IE", "en-NZ",
                "de", "nl", "ja", "zh", "ko", "he", "th", "tr",
            ],
            "%s %v": ["de-AT", "de-CH", "fr-CH", "it-CH", "nl-BE", "en-ZA", "pt-BR"],
            "%v %s": [
                "fr", "fr-BE", "fr-CA", "es", "it", "pt", "pl", "cs", "sk",
                "sv", "fi", "da", "nb", "hu", "ru", "uk", "el", "ro", "bg",
                "hr", "sl", "lt", "lv", "et", "is",
            ],
        },
        "d": {
            ",": [
                "de", "de-AT", "nl", "nl-BE", "fr", "fr-BE", "fr-CA", "es",
                "it", "pt", "pt-BR", "pl", "cs", "sk", "sv", "fi", "da", "nb",
                "hu", "ru", "uk", "el", "ro", "bg", "hr", "sl", "lt", "lv",
                "et", "is", "tr", "id", "en-ZA",
            ],
            ".": ["de-CH", "fr-CH", "it-CH", "en", "en-US", "en-GB", "ja", "zh", "ko", "he", "th"],
        },
        "t": {
            ".": [
                "de", "nl", "nl-BE", "es", "it", "pt-BR", "da", "el", "ro",
                "hr", "sl", "tr", "id", "is",
            ],
            "\u00a0": [  # no-break space
                "de-AT", "fr", "fr-BE", "fr-CA", "pt", "pl", "cs", "sk", "sv",
                "fi", "nb", "hu", "ru", "uk", "bg", "lt", "lv", "et", "en-ZA",
            ],
            "\u2019": ["de-CH", "fr-CH", "it-CH"],  # ’
        },
    },
    "currencies": {
        "s": {
            "\u20ac": ["EUR"],              # €
            "$": ["USD"],
            "A$": ["AUD"],
            "CA$": ["CAD"],
            "NZ$": ["NZD"],
            "R$": ["BRL"],
            "\u00a3": ["GBP"],              # £
            "\u00a5": ["JPY", "CNY"],       # ¥
            "\u20a9": ["KRW"],              # ₩
            "\u20b9": ["INR"],              # ₹
            "\u20bd": ["RUB"],              # ₽
            "\u20ba": ["TRY"],              # ₺
            "\u20aa": ["ILS"],              # ₪
            "\u0e3f": ["THB"],              # ฿
            "kr": ["SEK", "NOK", "DKK", "ISK"],
            "z\u0142": ["PLN"],             # zł
            "K\u010d": ["CZK"],             # Kč
            "Ft": ["HUF"],
            "lei": ["RON"],
            "R": ["ZAR"],
            "Rp": ["IDR"],
        },
    },
}
