"""ランタイムディレクトリの検証のテスト"""

from pathlib import Path

import pytest

from release_toolkit.release.erts import (
    InvalidErtsError,
    detect_erts_version,
    is_erts_lib,
    validate_erts,
)


def _make_erts(root: Path, erts_dirs: list[str], bin: bool = True, lib: bool = True) -> Path:
    """ランタイムディレクトリを模したディレクトリを作成する。"""
    root.mkdir(parents=True, exist_ok=True)
    for erts_dir in erts_dirs:
        (root / erts_dir).mkdir()
    if bin:
        (root / "bin").mkdir()
    if lib:
        (root / "lib").mkdir()
    return root


@pytest.mark.parametrize("include_erts", [None, True, False])
def test_validate_erts_without_path(include_erts: bool | None) -> None:
    """パスが指定されていない場合は検証しない。"""
    validate_erts(include_erts)


def test_validate_erts_valid(tmp_path: Path) -> None:
    """`erts-*` と `bin` と `lib` を 1 つずつ持つディレクトリは正しい。"""
    root = _make_erts(tmp_path / "otp", ["erts-10.3"])
    validate_erts(root)
    validate_erts(str(root))


def test_validate_erts_missing_everything(tmp_path: Path) -> None:
    """不足している全ての要素を理由として報告する。"""
    # Inputs
    root = _make_erts(tmp_path / "otp", [], bin=False, lib=False)
    # Expects
    true_reasons = ["missing_directory", "missing_bin", "missing_lib"]
    # Outputs
    with pytest.raises(InvalidErtsError) as e:
        validate_erts(root)
    # Test
    assert true_reasons == e.value.reasons


def test_validate_erts_too_many(tmp_path: Path) -> None:
    """`erts-*` が複数存在するディレクトリは不正である。"""
    root = _make_erts(tmp_path / "otp", ["erts-10.3", "erts-10.4"])
    with pytest.raises(InvalidErtsError) as e:
        validate_erts(root)
    assert e.value.reasons == ["too_many"]


def test_detect_erts_version(tmp_path: Path) -> None:
    """`detect_erts_version()` は `erts-<version>` からバージョンを取り出す。"""
    root = _make_erts(tmp_path / "otp", ["erts-10.3.5"])
    assert detect_erts_version(root) == "10.3.5"


@pytest.mark.parametrize("erts_dirs", [[], ["erts-10.3", "erts-10.4"]])
def test_detect_erts_version_undeterminable(tmp_path: Path, erts_dirs: list[str]) -> None:
    """`erts-*` がちょうど 1 つでない場合はバージョンを決められない。"""
    root = _make_erts(tmp_path / "otp", erts_dirs)
    with pytest.raises(InvalidErtsError) as e:
        detect_erts_version(root)
    assert e.value.reasons == ["cannot_determine_version"]


def test_is_erts_lib() -> None:
    """`is_erts_lib()` はライブラリディレクトリ配下のアプリケーションを判定する。"""
    assert is_erts_lib("/usr/lib/erlang/lib/kernel-6.0", "/usr/lib/erlang/lib") is True
    assert is_erts_lib("/home/user/app/_build/lib/my_app", "/usr/lib/erlang/lib") is False
