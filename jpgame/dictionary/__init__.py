from jpgame.dictionary.provider import (
    InMemoryQuestionProvider,
    JsonFileQuestionProvider,
    parse_dictionary,
)
from jpgame.dictionary.schema import DictionaryDocument, DictionaryEntry

__all__ = [
    "DictionaryDocument",
    "DictionaryEntry",
    "InMemoryQuestionProvider",
    "JsonFileQuestionProvider",
    "parse_dictionary",
]
