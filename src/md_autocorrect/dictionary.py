"""Misspelling dictionary — lowercase misspelling → canonical correction.

The built-in map covers common English typos.  Corrections carry their
own casing beyond the first letter (proper nouns are stored capitalized).
All mappings handed out are read-only; merging builds a new one.
"""

from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

_COMMON_MISSPELLINGS: dict[str, str] = {
    "abandonned": "abandoned",
    "aberation": "aberration",
    "abilties": "abilities",
    "abilty": "ability",
    "abondon": "abandon",
    "abotu": "about",
    "abscence": "absence",
    "absense": "absence",
    "absolutly": "absolutely",
    "absoltely": "absolutely",
    "accademic": "academic",
    "accidentaly": "accidentally",
    "accodringly": "accordingly",
    "accomodate": "accommodate",
    "accomodation": "accommodation",
    "accross": "across",
    "acheive": "achieve",
    "acheived": "achieved",
    "acknowlege": "acknowledge",
    "acquaintence": "acquaintance",
    "acommodate": "accommodate",
    "adress": "address",
    "agressive": "aggressive",
    "alot": "a lot",
    "amature": "amateur",
    "apparantly": "apparently",
    "appearence": "appearance",
    "aquire": "acquire",
    "arguement": "argument",
    "assasination": "assassination",
    "basicly": "basically",
    "becuase": "because",
    "beggining": "beginning",
    "beleive": "believe",
    "belive": "believe",
    "bizzare": "bizarre",
    "buisness": "business",
    "calender": "calendar",
    "carribean": "Caribbean",
    "cemetary": "cemetery",
    "changable": "changeable",
    "cheif": "chief",
    "collegue": "colleague",
    "comming": "coming",
    "commited": "committed",
    "concious": "conscious",
    "condidtion": "condition",
    "copywrite": "copyright",
    "curiousity": "curiosity",
    "definately": "definitely",
    "defenately": "definitely",
    "definatly": "definitely",
    "dilemna": "dilemma",
    "dissapoint": "disappoint",
    "dissapointed": "disappointed",
    "embarass": "embarrass",
    "embarassing": "embarrassing",
    "enviroment": "environment",
    "existance": "existence",
    "experiance": "experience",
    "familar": "familiar",
    "febuary": "February",
    "finaly": "finally",
    "florescent": "fluorescent",
    "foriegn": "foreign",
    "forseeable": "foreseeable",
    "fourty": "forty",
    "freind": "friend",
    "goverment": "government",
    "gaurd": "guard",
    "happend": "happened",
    "harrass": "harass",
    "hieght": "height",
    "humerous": "humorous",
    "ignorence": "ignorance",
    "immediatly": "immediately",
    "independant": "independent",
    "indispensible": "indispensable",
    "intelligance": "intelligence",
    "jewelery": "jewelry",
    "knowlege": "knowledge",
    "liason": "liaison",
    "libary": "library",
    "lisence": "license",
    "maintainance": "maintenance",
    "maintenence": "maintenance",
    "millenium": "millennium",
    "mischevious": "mischievous",
    "mispell": "misspell",
    "neccessary": "necessary",
    "necessery": "necessary",
    "nieghbor": "neighbor",
    "noticable": "noticeable",
    "occassion": "occasion",
    "occured": "occurred",
    "occurence": "occurrence",
    "occurrance": "occurrence",
    "ocurred": "occurred",
    "pavillion": "pavilion",
    "persistant": "persistent",
    "pharoah": "Pharaoh",
    "posession": "possession",
    "prefered": "preferred",
    "privelege": "privilege",
    "probaly": "probably",
    "propoganda": "propaganda",
    "publically": "publicly",
    "realy": "really",
    "recieve": "receive",
    "recieved": "received",
    "recomend": "recommend",
    "refered": "referred",
    "relevent": "relevant",
    "religous": "religious",
    "remeber": "remember",
    "repitition": "repetition",
    "rythm": "rhythm",
    "seperate": "separate",
    "seperately": "separately",
    "sieze": "seize",
    "similiar": "similar",
    "sincerly": "sincerely",
    "speach": "speech",
    "succesful": "successful",
    "supercede": "supersede",
    "suprise": "surprise",
    "teh": "the",
    "tendancy": "tendency",
    "therefor": "therefore",
    "threshhold": "threshold",
    "tommorow": "tomorrow",
    "tommorrow": "tomorrow",
    "tounge": "tongue",
    "truely": "truly",
    "twelth": "twelfth",
    "tyrany": "tyranny",
    "untill": "until",
    "wednsday": "Wednesday",
    "wierd": "weird",
    "wich": "which",
    "writting": "writing",
}

DEFAULT_DICTIONARY: Mapping[str, str] = MappingProxyType(_COMMON_MISSPELLINGS)


def merge_dictionaries(*maps: Mapping[str, str]) -> Mapping[str, str]:
    """Return a new read-only mapping; later maps override earlier ones."""
    merged: dict[str, str] = {}
    for m in maps:
        merged.update((k.lower(), v) for k, v in m.items())
    return MappingProxyType(merged)


def load_dictionary(path: str | Path) -> Mapping[str, str]:
    """Load a YAML mapping of misspelling → correction.

    Raises ValueError when the file is not a mapping of strings.
    """
    import yaml  # shared with config loading
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of misspelling: correction")
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str) or not value:
            raise ValueError(f"{path}: invalid entry {key!r}: {value!r}")
    return merge_dictionaries(data)
