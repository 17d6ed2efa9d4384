"""
リリース出力ディレクトリに存在するリリースバージョンを新しい順に出力する。

例
$ python run.py --output_dir rel/my_app
0.2.2
0.2.1-1-d3adb3f
0.2.1

$ python run.py --output_dir rel/my_app --latest
0.2.2
"""

import argparse
import logging
import sys
from pathlib import Path

from release_toolkit.release.erts import InvalidErtsError, detect_erts_version, validate_erts
from release_toolkit.release.release_scanner import ReleaseVersionScanner
from release_toolkit.setting.setting_manager import (
    USER_SETTING_PATH,
    SettingHandler,
    SettingLoadError,
)
from release_toolkit.utility.text_utility import indent_message


def _check_erts(erts_path: Path) -> None:
    """ランタイムディレクトリを検証し、検出したバージョンを出力する。"""
    validate_erts(erts_path)
    erts_version = detect_erts_version(erts_path)
    print(f"Info: Using ERTS {erts_version} in {erts_path}.", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """コマンドライン引数に従ってリリースバージョンを標準出力へ出力する。"""
    parser = argparse.ArgumentParser(
        description="リリース出力ディレクトリのリリースバージョンを新しい順に出力します。"
    )
    parser.add_argument(
        "--output_dir",
        type=Path,
        default=None,
        help="リリース出力ディレクトリ。指定しない場合は設定ファイルの値を用います。",
    )
    parser.add_argument(
        "--latest",
        action="store_true",
        help="最新のリリースバージョンのみを出力します。",
    )
    parser.add_argument(
        "--validate_erts",
        type=Path,
        default=None,
        help="同梱するランタイム (ERTS) ディレクトリ。指定した場合は事前に検証します。",
    )
    parser.add_argument(
        "--setting_file",
        type=Path,
        default=USER_SETTING_PATH,
        help="設定ファイルを指定できます。",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="詳細なログを出力します。",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        setting = SettingHandler(args.setting_file).load()

        output_dir: Path | None = args.output_dir or setting.output_dir
        if output_dir is None:
            print(
                "Error: --output_dir もしくは設定ファイルの output_dir を指定してください。",
                file=sys.stderr,
            )
            return 1

        erts_path = args.validate_erts
        if erts_path is None and isinstance(setting.include_erts, Path):
            erts_path = setting.include_erts
        if erts_path is not None:
            _check_erts(erts_path)

        scanner = ReleaseVersionScanner(output_dir)
        if args.latest:
            latest = scanner.latest_version()
            if latest is None:
                print(f"Warning: {scanner.releases_dir} にリリースが存在しません。", file=sys.stderr)
                return 1
            print(latest)
        else:
            for version in scanner.list_versions():
                print(version)
    except InvalidErtsError as e:
        print("Error: ランタイムディレクトリが不正です。", file=sys.stderr)
        print(indent_message("\n".join(e.reasons)), file=sys.stderr)
        return 1
    except SettingLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
