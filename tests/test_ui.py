"""Tests for the GUI tabs, run on Qt's offscreen platform."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from measuremint.core.categories import Category, TemperatureUnit  # noqa: E402
from measuremint.ui.main_window import SharedSession  # noqa: E402
from measuremint.ui.modules.converter_tab import ConverterTab  # noqa: E402
from measuremint.ui.modules.history_tab import HistoryTab  # noqa: E402
from measuremint.ui.widgets.result_display import ResultCard  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def _rows(tab):
    return tab.table.findChild(QtWidgets.QTableWidget).rowCount()


class TestHistoryTab:
    def test_starts_empty(self, qapp):
        tab = HistoryTab(SharedSession())
        assert _rows(tab) == 0
        assert not tab.placeholder.isHidden()
        assert not tab.clear_btn.isEnabled()

    def test_conversion_adds_row(self, qapp):
        shared = SharedSession()
        tab = HistoryTab(shared)
        shared.set_input_text("1")
        shared.convert()
        shared.convert()
        assert _rows(tab) == 1
        assert tab.placeholder.isHidden()
        assert tab.clear_btn.isEnabled()

    def test_clear_empties_table(self, qapp):
        shared = SharedSession()
        tab = HistoryTab(shared)
        shared.set_input_text("1")
        shared.convert()
        shared.set_input_text("2")
        shared.convert()
        assert _rows(tab) == 2

        shared.clear_history()
        assert _rows(tab) == 0
        assert not tab.placeholder.isHidden()
        assert not tab.clear_btn.isEnabled()

        shared.convert()
        assert _rows(tab) == 1


class TestConverterTab:
    def test_category_switch_replaces_units(self, qapp):
        shared = SharedSession()
        tab = ConverterTab(shared)
        shared.select_category(Category.TEMPERATURE)
        assert tab.form.get("from") == TemperatureUnit.CELSIUS
        assert tab.form.get("to") == TemperatureUnit.FAHRENHEIT
        assert tab.result_card.isHidden()

    def test_result_card_shows_conversion(self, qapp):
        shared = SharedSession()
        tab = ConverterTab(shared)
        shared.set_input_text("1")
        shared.convert()
        assert not tab.result_card.isHidden()


class TestResultCard:
    def test_hidden_when_empty(self, qapp):
        card = ResultCard()
        card.set_text("3.281 ft")
        assert not card.isHidden()
        card.set_text("")
        assert card.isHidden()
