import re

from shopcore.version import (
    AUTHOR,
    BUILD_TIMESTAMP,
    PROJECT_NAME,
    VERSION,
    about_text,
    banner_text,
    display_about,
    display_banner,
)


def test_about_shows_fixed_metadata():
    text = about_text()
    assert "  About Shopping Management System\n" in text
    assert "  Version   : 1.0.0\n" in text
    assert "  Author    : Shopping Management System Team\n" in text


def test_banner_build_timestamp_shape():
    match = re.search(r"  Built     : (.*)\n", banner_text())
    assert match is not None
    built = match.group(1)
    assert built == BUILD_TIMESTAMP
    assert re.fullmatch(r"[A-Z][a-z]{2} [ \d]\d \d{4} \d{2}:\d{2}:\d{2}", built)


def test_banner_contains_metadata():
    text = banner_text()
    assert f"  {PROJECT_NAME}\n" in text
    assert f"  Version   : {VERSION}\n" in text
    assert f"  Author    : {AUTHOR}\n" in text
    assert f"  Built     : {BUILD_TIMESTAMP}\n" in text
    assert "=" * 60 in text
    assert text.endswith("\n")


def test_about_contains_title_and_version():
    text = about_text()
    assert f"  About {PROJECT_NAME}\n" in text
    assert f"  Version   : {VERSION}\n" in text
    assert "/ ___|" not in text


def test_display_banner_prints_banner(capsys):
    display_banner()
    assert capsys.readouterr().out == banner_text()


def test_display_about_prints_about(capsys):
    display_about()
    assert capsys.readouterr().out == about_text()