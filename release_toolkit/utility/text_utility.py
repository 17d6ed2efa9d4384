"""テキストに関する utility"""

import sys


def indent_message(message: str, indent: str = "    ") -> str:
    """外部ビルド処理が出力した複数行の警告・エラー文を、各行を字下げした形式に整える。"""
    lines = [indent + line for line in message.split("\n")]
    return "\n".join(lines).rstrip()


def newline() -> str:
    """実行中の OS の改行文字を返す。"""
    return "\r\n" if sys.platform == "win32" else "\n"
