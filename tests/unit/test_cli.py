"""Tests for the qrcode-admin command-line preview."""

from __future__ import annotations

from pathlib import Path

import pytest

from qrcode_admin.cli import main

FIXTURE = """\
- title: Banner
  destination: product
  moneySpent: 120
  tags: [vip]
- title: apple
  destination: cart
  moneySpent: 900
- title: Card
  destination: product
  moneySpent: 40
"""


@pytest.fixture
def fixture_path(tmp_path: Path) -> Path:
    path = tmp_path / "codes.yaml"
    path.write_text(FIXTURE, encoding="utf-8")
    return path


def _rows(output: str) -> list[str]:
    return [line.split()[0] for line in output.splitlines()[1:] if not line.startswith("  ")]


class TestCli:
    def test_default_listing(self, fixture_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(fixture_path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("View: All  (3 QR codes)")
        assert _rows(out) == ["apple", "Banner", "Card"]

    def test_view_query_and_sort(
        self, fixture_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        args = [str(fixture_path), "--view", "Product Links", "--sort", "campaign_desc"]
        assert main(args) == 0
        assert _rows(capsys.readouterr().out) == ["Card", "Banner"]

    def test_filters_are_listed(
        self, fixture_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(fixture_path), "--money-spent", "100", "1000", "--tag", "VIP"]) == 0
        out = capsys.readouterr().out
        assert "  filter: Money spent is between $100 and $1000" in out
        assert "  filter: Tagged with VIP" in out
        assert _rows(out) == ["Banner"]

    def test_unknown_view(self, fixture_path: Path) -> None:
        assert main([str(fixture_path), "--view", "Nope"]) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.yaml")]) == 1
