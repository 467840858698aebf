from __future__ import annotations

import argparse

from jpgame.core.config import get_settings
from jpgame.dictionary.provider import JsonFileQuestionProvider
from jpgame.game.errors import DictionaryUnavailableError


def _run(path: str) -> int:
    try:
        records = JsonFileQuestionProvider(path).load_records()
    except DictionaryUnavailableError as exc:
        print(f"validate_dictionary failed: {exc}")  # noqa: T201
        return 1

    print(f"validate_dictionary total={len(records)}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check that a quiz dictionary file loads.")
    parser.add_argument("path", nargs="?", default=None, help="defaults to JPGAME_DICTIONARY_PATH")
    args = parser.parse_args(argv)
    return _run(args.path or get_settings().dictionary_path)


if __name__ == "__main__":
    raise SystemExit(main())
