"""Behaviour tests for rendering configured segment groups to HTML pages."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from glow_ui import cli

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "group_pages.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    return {}


@given("a gallery config with an icon-only toolbar")
def given_toolbar_config(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    config_path = tmp_path / "groups.yaml"
    config_path.write_text(
        f"""
defaults:
  output_dir: {tmp_path / "public"}
groups:
  alignment:
    label: Text alignment
    role: toolbar
    size: sm
    segments:
      - leading_glyph: text-align-left
        accessible_name: Align left
      - leading_glyph: text-align-center
        accessible_name: Align center
      - leading_glyph: text-align-right
        accessible_name: Align right
""",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path
    scenario_state["output_dir"] = tmp_path / "site"


@when(parsers.parse('I run the render command for group "{group}"'))
def when_render_group(scenario_state: dict[str, object], group: str) -> None:
    config_path = scenario_state["config_path"]
    output_dir = scenario_state["output_dir"]
    assert isinstance(config_path, Path)
    assert isinstance(output_dir, Path)
    cli.render(config=config_path, group=group, output_dir=output_dir)
    html_path = output_dir / f"group-{group}.html"
    assert html_path.exists(), "Expected the group page to be written"
    scenario_state["soup"] = BeautifulSoup(
        html_path.read_text(encoding="utf-8"), "html.parser"
    )


@then(parsers.parse('the page contains a "{role}" labelled "{label}"'))
def then_container_role(
    scenario_state: dict[str, object], role: str, label: str
) -> None:
    soup = scenario_state["soup"]
    assert isinstance(soup, BeautifulSoup)
    container = soup.find("div", attrs={"role": role})
    assert container is not None, f"Expected a container with role {role}"
    assert container.get("aria-label") == label


@then("every button in the page has an accessible name")
def then_buttons_named(scenario_state: dict[str, object]) -> None:
    soup = scenario_state["soup"]
    assert isinstance(soup, BeautifulSoup)
    buttons = soup.find_all("button")
    assert len(buttons) == 3
    assert all(button.get("aria-label") for button in buttons), (
        "Icon-only buttons must carry aria-label"
    )


@then("the first button is rounded on its leading edge only")
def then_first_button_geometry(scenario_state: dict[str, object]) -> None:
    soup = scenario_state["soup"]
    assert isinstance(soup, BeautifulSoup)
    first = soup.find("button")
    assert first is not None
    classes = set(first["class"])
    assert "rounded-l-sm" in classes
    assert not classes & {"rounded-r-sm", "rounded-sm"}
    assert "-ml-px" not in classes
