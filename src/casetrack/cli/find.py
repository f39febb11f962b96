#!/usr/bin/env python3
"""
氏名がキーワードをフレーズとして含むレコードを一覧表示します。

キーワードは連続する単語の先頭に、指定した順序で、大文字小文字を無視して一致する必要があります。

Usage:
  casetrack-find [-c CONFIG] [-D] KEYWORD...

Options:
  -c CONFIG         : CONFIG を設定ファイルとして読み込んで実行します。[default: config.yaml]
  -D                : デバッグモードで動作します。
"""

from __future__ import annotations

import logging
import pathlib
import sys

import docopt
import my_lib.logger

import casetrack.config
import casetrack.find
import casetrack.log_format
import casetrack.store
from casetrack.exceptions import CaseTrackError


def main() -> None:
    """Console script entry point."""
    assert __doc__ is not None  # noqa: S101
    args = docopt.docopt(__doc__)

    config_file = pathlib.Path(args["-c"])
    debug_mode = args["-D"]

    my_lib.logger.init("casetrack", level=logging.DEBUG if debug_mode else logging.INFO)

    logging.info("Using config: %s", config_file)

    try:
        config = casetrack.config.load(config_file)
        book = casetrack.store.load(config.data.address_book)
        predicate = casetrack.find.parse_arguments(" ".join(args["KEYWORD"]))
        result = casetrack.find.execute(book, predicate)
    except CaseTrackError as e:
        logging.error("%s", e)
        sys.exit(1)

    for line in casetrack.log_format.format_result(result):
        print(line)  # noqa: T201

    sys.exit(0)


if __name__ == "__main__":
    main()
