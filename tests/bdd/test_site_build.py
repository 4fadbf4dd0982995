"""Behaviour tests for building a site from a djot tree.

The scenarios in ``features/site_build.feature`` write a small djot source
tree into ``tmp_path``, run :class:`~simple_ssg.generator.SiteGenerator`, and
assert on the generated pages: table-of-contents ordering and ``../``
prefixes for pages in sibling folders, and the lenient versus strict handling
of a link to a document that does not exist.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_site_build.py -v

Prerequisites:
    - The test extra (pytest-bdd and BeautifulSoup) installed.
    - The feature file at ``features/site_build.feature``.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from simple_ssg.config import BuildConfig
from simple_ssg.errors import DanglingLinkError, SiteBuildError
from simple_ssg.generator import SiteGenerator

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

TEMPLATE = "<nav><!-- {TABLE_OF_CONTENTS} --></nav><main><!-- {CONTENT} --></main>"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@given("a source tree with pages in two sibling folders")
def given_sibling_folders(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write an index plus one page in each of ``alpha/`` and ``beta/``."""
    source = tmp_path / "target"
    _write(
        source,
        {
            "template.html": TEMPLATE,
            "index.dj": "# Home\n",
            "alpha/one.dj": "One\n",
            "beta/two.dj": "Two\n",
        },
    )
    scenario_state["source"] = source


@given("a source tree whose index links to a missing document")
def given_dangling_link(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write an index whose only link targets ``missing.dj``."""
    source = tmp_path / "target"
    _write(source, {"index.dj": "See [the missing page](missing.dj).\n"})
    scenario_state["source"] = source


def _build(
    scenario_state: dict[str, object], tmp_path: Path, *, strict: bool
) -> None:
    config = BuildConfig(
        source=typ.cast("Path", scenario_state["source"]),
        output_dir=tmp_path / "output",
        strict=strict,
    )
    scenario_state["output"] = config.output_dir
    try:
        SiteGenerator(config).run()
    except SiteBuildError as exc:
        scenario_state["error"] = exc


@when("I build the site")
def when_build(
    scenario_state: dict[str, object],
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Run a lenient build, capturing warnings."""
    with caplog.at_level(logging.WARNING):
        _build(scenario_state, tmp_path, strict=False)
    scenario_state["log"] = caplog.text


@when("I build the site in strict mode")
def when_build_strict(scenario_state: dict[str, object], tmp_path: Path) -> None:
    """Run a strict build, recording any raised build error."""
    _build(scenario_state, tmp_path, strict=True)


def _read_page(scenario_state: dict[str, object], page: str) -> str:
    output = typ.cast("Path", scenario_state["output"])
    return (output / page).read_text(encoding="utf-8")


@then(parsers.parse('the page "{page}" lists its folder heading before itself'))
def then_heading_before_page(scenario_state: dict[str, object], page: str) -> None:
    """Verify the folder heading opens the list that contains the current page."""
    html = _read_page(scenario_state, page)
    folder, stem = page.removesuffix(".html").split("/")
    heading = html.index(f"<li><b><u>{folder}:</u></b></li><ul>")
    current = html.index(f"<li><b>{stem}</b></li>")
    assert heading < current, "expected the folder heading before the current page"


@then(parsers.parse('the page "{page}" links to "{href}"'))
def then_toc_links(scenario_state: dict[str, object], page: str, href: str) -> None:
    """Verify the table of contents links to ``href``."""
    soup = BeautifulSoup(_read_page(scenario_state, page), "html.parser")
    hrefs = [anchor["href"] for anchor in soup.find("nav").find_all("a")]
    assert href in hrefs, f"expected {href!r} in table of contents links {hrefs!r}"


@then(parsers.parse('the page "{page}" contains a link to "{href}"'))
def then_content_link(scenario_state: dict[str, object], page: str, href: str) -> None:
    """Verify the rendered document body links to ``href``."""
    soup = BeautifulSoup(_read_page(scenario_state, page), "html.parser")
    assert [anchor["href"] for anchor in soup.find_all("a")] == [href]


@then("a dangling link warning was logged")
def then_warning_logged(scenario_state: dict[str, object]) -> None:
    """Verify the lenient build reported the missing document."""
    assert "missing.dj does not exist" in typ.cast("str", scenario_state["log"])
    assert "error" not in scenario_state


@then("the build fails with a dangling link error")
def then_build_failed(scenario_state: dict[str, object]) -> None:
    """Verify the strict build raised and wrote no pages."""
    assert isinstance(scenario_state.get("error"), DanglingLinkError)
    output = typ.cast("Path", scenario_state["output"])
    assert not (output / "index.html").exists()
