"""Default allow-lists per region.

Any edit here changes what a cached chunk means, so it must come with a
CACHE_VERSION bump in ``settings``.
"""

DEFAULT_DOMAINS: dict[str, list[str]] = {
    "CA": [
        "theglobeandmail.com",
        "thestar.com",
        "cbc.ca",
        "nationalpost.com",
        "ctvnews.ca",
        "globalnews.ca",
        "ledevoir.com",
    ],
    "US": [
        "nytimes.com",
        "washingtonpost.com",
        "wsj.com",
        "apnews.com",
        "reuters.com",
        "bloomberg.com",
        "npr.org",
        "cnn.com",
        "foxnews.com",
        "nbcnews.com",
    ],
    "EU": [
        "bbc.co.uk",
        "theguardian.com",
        "ft.com",
        "reuters.com",
        "france24.com",
        "lemonde.fr",
        "spiegel.de",
        "zeit.de",
        "elpais.com",
        "corriere.it",
        "repubblica.it",
        "rte.ie",
        "politico.eu",
    ],
}

SOURCE_COUNTRIES: dict[str, list[str]] = {
    "CA": ["canada"],
    "US": ["unitedstates"],
    "EU": [
        "unitedkingdom",
        "france",
        "germany",
        "spain",
        "italy",
        "netherlands",
        "belgium",
        "switzerland",
        "sweden",
        "norway",
        "denmark",
        "ireland",
        "portugal",
        "austria",
        "poland",
        "finland",
        "greece",
        "czechrepublic",
        "hungary",
        "romania",
    ],
}
