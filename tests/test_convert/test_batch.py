"""Tests for batch conversion."""

import pytest

from tests.conftest import CHECK_SVG, CIRCLE_SVG, HOME_SVG

from svg2react.convert.batch import (
    BatchFailure,
    ConvertedFile,
    convert_batch,
    convert_file,
    convert_paths,
    read_svg_text,
)
from svg2react.convert.transformer import transform
from svg2react.errors import SvgReadError

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe"


def _files():
    return [
        ("icon-check.svg", CHECK_SVG.encode()),
        ("logo.png", PNG_BYTES),
        ("home_outline.svg", HOME_SVG.encode()),
    ]


def test_read_svg_text():
    assert read_svg_text(CHECK_SVG.encode()) == CHECK_SVG
    assert read_svg_text(b"\xef\xbb\xbf" + CHECK_SVG.encode()) == CHECK_SVG


def test_read_binary_fails():
    with pytest.raises(SvgReadError, match="Not UTF-8"):
        read_svg_text(PNG_BYTES)


def test_read_non_svg_text_fails():
    with pytest.raises(SvgReadError, match="Missing <svg> tag"):
        read_svg_text(b"just some notes")


def test_convert_file_uses_base_name():
    converted = convert_file("icons/arrow-up.svg", CHECK_SVG.encode())
    assert converted == ConvertedFile(
        original_name="icons/arrow-up.svg",
        component_name="ArrowUp",
        code=transform(CHECK_SVG, "ArrowUp"),
    )


def test_batch_skips_bad_file():
    result = convert_batch(_files())
    assert result.succeeded == 2
    assert result.total == 3
    assert [c.original_name for c in result.converted] == ["icon-check.svg", "home_outline.svg"]
    assert len(result.failed) == 1
    assert result.failed[0].original_name == "logo.png"


@pytest.mark.parametrize("workers", [1, 4])
def test_batch_pairs_names_with_own_code(workers):
    result = convert_batch(_files(), max_workers=workers)
    by_name = {c.original_name: c for c in result.converted}
    assert by_name["icon-check.svg"].component_name == "IconCheck"
    assert by_name["icon-check.svg"].code == transform(CHECK_SVG, "IconCheck")
    assert by_name["home_outline.svg"].component_name == "HomeOutline"
    assert by_name["home_outline.svg"].code == transform(HOME_SVG, "HomeOutline")


def test_batch_many_files_threaded():
    files = [(f"icon-{i}.svg", CIRCLE_SVG.encode()) for i in range(20)]
    result = convert_batch(files, max_workers=4)
    assert result.succeeded == 20
    assert [c.original_name for c in result.converted] == [name for name, _ in files]


def test_empty_batch():
    result = convert_batch([])
    assert result.total == 0
    assert result.converted == []


def test_convert_paths(tmp_path):
    (tmp_path / "icon-a.svg").write_text(CHECK_SVG, encoding="utf-8")
    (tmp_path / "broken.svg").write_bytes(PNG_BYTES)
    missing = tmp_path / "missing.svg"

    result = convert_paths([tmp_path / "icon-a.svg", tmp_path / "broken.svg", missing])
    assert [c.component_name for c in result.converted] == ["IconA"]
    failed = {f.original_name for f in result.failed}
    assert failed == {"broken.svg", "missing.svg"}
    assert all(isinstance(f, BatchFailure) for f in result.failed)


def test_read_uppercase_svg_tag_fails():
    # The root would never receive className={className}
    with pytest.raises(SvgReadError, match="Missing <svg> tag"):
        read_svg_text(b'<SVG width="1"></SVG>')
