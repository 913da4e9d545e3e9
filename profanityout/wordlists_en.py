"""English word lists and character replacement tables."""

from __future__ import annotations

DEFAULT_PROFANITIES = (
    "anal",
    "anus",
    "arse",
    "ass",
    "asshole",
    "ballsack",
    "balls",
    "bastard",
    "bitch",
    "bitcη",  # the final letter is Greek eta, not an ASCII n
    "btch",
    "biatch",
    "blowjob",
    "bollock",
    "bollok",
    "boner",
    "boob",
    "bugger",
    "butt",
    "choad",
    "clitoris",
    "cock",
    "coon",
    "crap",
    "cum",
    "cunt",
    "dick",
    "dildo",
    "douchebag",
    "dyke",
    "fag",
    "feck",
    "fellate",
    "fellatio",
    "felching",
    "fuck",
    "fudgepacker",
    "flange",
    "gtfo",
    "gyat",
    "hoe",
    "horny",
    "incest",
    "jerk",
    "jizz",
    "labia",
    "masturbat",
    "muff",
    "naked",
    "nazi",
    "nigga",
    "niggu",
    "nipple",
    "nips",
    "nude",
    "pedophile",
    "penis",
    "piss",
    "poop",
    "porn",
    "prick",
    "prostitut",
    "pube",
    "pussie",
    "pussy",
    "queer",
    "rape",
    "rapist",
    "retard",
    "retarded",
    "rimjob",
    "scrotum",
    "sex",
    "sexy",
    "shit",
    "shiter",
    "slut",
    "spunk",
    "stfu",
    "suckmy",
    "tits",
    "tittie",
    "titty",
    "turd",
    "twat",
    "vagina",
    "wank",
    "whore",
)

DEFAULT_FALSE_POSITIVES = (
    "analyse",
    "analyze",
    "analytic",
    "badass",
    "bass",
    "bullshit",
)

DEFAULT_SUSPECTS: tuple = ()

LEET_SPEAK_CHARACTERS = {
    # Common
    "!": "i",
    "@": "a",
    "4": "a",
    "8": "b",
    "6": "b",
    "(": "c",
    "<": "c",
    "3": "e",
    "9": "g",
    "#": "h",
    "1": "i",
    "0": "o",
    "5": "s",
    "$": "s",
    "+": "t",
    "7": "l",
    "2": "z",
    # Greek letters
    "α": "a",
    "β": "b",
    "γ": "y",
    "∆": "a",
    "δ": "d",
    "ε": "e",
    "ζ": "z",
    "η": "n",
    "θ": "o",
    "ι": "i",
    "κ": "k",
    "λ": "l",
    "μ": "u",
    "ν": "v",
    "ο": "o",
    "ρ": "p",
    "ς": "s",
    "τ": "t",
    "υ": "u",
    "φ": "p",
    "χ": "x",
    "ψ": "t",
    "\u03a9": "o",
    "ω": "w",
    # Math symbols
    "⊗": "o",
    "⊕": "o",
    "σ": "o",
    "∩": "n",
    "∪": "u",
    "⊂": "c",
    "⊆": "c",
    "⊄": "c",
    "∈": "e",
    "⊖": "o",
    "Ø": "o",
    "∨": "v",
    "∄": "a",
    "∫": "l",
    # Letterlike
    "ℂ": "c",
    "℃": "c",
    "℄": "c",
    "ℇ": "e",
    "℉": "f",
    "ℊ": "g",
    "ℋ": "h",
    "ℌ": "h",
    "ℍ": "h",
    "ℎ": "h",
    "ℏ": "h",
    "ℐ": "j",
    "ℑ": "j",
    "ℒ": "l",
    "ℓ": "l",
    "℔": "b",
    "ℕ": "n",
    "№": "n",
    "℗": "p",
    "℘": "p",
    "ℙ": "p",
    "ℚ": "q",
    "ℛ": "r",
    "ℜ": "r",
    "ℝ": "r",
    "℟": "r",
    "℣": "v",
    "ℤ": "z",
    "℧": "o",
    "℩": "i",
    "\u212a": "k",
    "\u212b": "a",
    "ℬ": "b",
    "ℭ": "c",
    "℮": "e",
    "ℰ": "e",
    "ℱ": "f",
    "ℳ": "m",
    "ℴ": "o",
    "ℵ": "n",
    "ℹ": "i",
    "℺": "o",
    "ℼ": "n",
    "ℽ": "v",
    "ℿ": "n",
    "⅀": "e",
    "⅁": "g",
    "⅄": "l",
    "ⅅ": "d",
    "ⅆ": "d",
    "ⅇ": "e",
    "ⅈ": "i",
    "ⅉ": "j",
    "ⓟ": "p",
    "ʉ": "u",
    "ȿ": "s",
    "ⓢ": "s",
    "ⓨ": "y",
    "ż": "z",
    "ž": "z",
    # Confusables
    "е": "e",
    "о": "o",
    "ѕ": "s",
    "х": "x",
    "і": "i",
    "ј": "j",
    "р": "p",
    "с": "c",
    "у": "y",
    "ѵ": "v",
    "ɑ": "a",
    "ɡ": "g",
    "ɩ": "i",
    "ɒ": "o",
    "г": "r",
    "π": "n",
    "ո": "n",
    "հ": "h",
    "ս": "u",
    "ց": "g",
    "ք": "p",
    "ყ": "y",
    "୦": "o",
    "০": "o",
    "੦": "o",
    "౦": "o",
    "೦": "o",
    "๐": "o",
    "໐": "o",
    "᠐": "o",
    "〇": "o",
    "օ": "o",
    "б": "b",
    "৪": "b",
    "৭": "g",
    "੧": "g",
    "୨": "g",
}

SPECIAL_CHARACTERS = {
    "-": " ",
    "_": " ",
    "|": " ",
    ".": " ",
    ",": " ",
    "(": " ",
    ")": " ",
    "<": " ",
    ">": " ",
    '"': " ",
    "`": " ",
    "~": " ",
    "*": " ",
    "&": " ",
    "%": " ",
    "$": " ",
    "#": " ",
    "@": " ",
    "!": " ",
    "?": " ",
    "+": " ",
}

WILDCARD_CHARACTERS = {
    "*": "*",
    "?": "*",
}