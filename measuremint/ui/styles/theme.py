"""Application theme and stylesheet for the MeasureMint GUI."""

STYLESHEET = """
QMainWindow {
    background-color: #f2f4f3;
}
QWidget {
    background-color: #f2f4f3;
    color: #1f2a27;
    font-size: 12px;
}
QTabWidget::pane {
    border: none;
    background-color: #f2f4f3;
}
QTabBar::tab {
    background-color: #e3e8e6;
    color: #4b5a56;
    padding: 8px 18px;
    border: none;
    border-top-left-radius: 6px;
    border-top-right-radius: 6px;
    margin-right: 2px;
}
QTabBar::tab:selected {
    background-color: #ffffff;
    color: #2e9d7b;
    border-bottom: 2px solid #3cb48f;
}
QTabBar::tab:hover {
    background-color: #eef3f1;
}
QLabel {
    background-color: transparent;
}
QLabel[caption="true"] {
    color: #7a8783;
    font-size: 11px;
    padding-top: 6px;
}
QLabel[result="true"] {
    font-size: 18px;
    font-weight: bold;
    padding-top: 4px;
}
QWidget[card="true"] {
    background-color: #ffffff;
    border-radius: 12px;
}
QScrollArea {
    border: none;
}
QPushButton {
    background-color: #3cb48f;
    color: #ffffff;
    border: none;
    border-radius: 10px;
    padding: 10px 16px;
    font-weight: bold;
    min-height: 28px;
}
QPushButton:hover {
    background-color: #47c49d;
}
QPushButton:pressed {
    background-color: #2e9d7b;
}
QPushButton:disabled {
    background-color: #c9d1ce;
    color: #8a9692;
}
QPushButton[secondary="true"] {
    background-color: #ffffff;
    color: #2e9d7b;
}
QPushButton[secondary="true"]:hover {
    background-color: #eef8f4;
}
QPushButton[danger="true"] {
    background-color: transparent;
    color: #d64545;
    padding: 4px 10px;
}
QPushButton[danger="true"]:disabled {
    color: #c9d1ce;
}
QLineEdit, QComboBox {
    background-color: #e9edeb;
    color: #1f2a27;
    border: 1px solid transparent;
    border-radius: 8px;
    padding: 6px 10px;
    min-height: 24px;
}
QLineEdit:focus, QComboBox:focus {
    border: 1px solid #3cb48f;
}
QComboBox::drop-down {
    border: none;
    width: 20px;
}
QComboBox QAbstractItemView {
    background-color: #ffffff;
    selection-background-color: #d9f2e9;
    selection-color: #1f2a27;
    border: 1px solid #d5dcd9;
}
QTableWidget {
    background-color: #ffffff;
    alternate-background-color: #f7f9f8;
    gridline-color: #eef1f0;
    border: none;
    border-radius: 8px;
}
QTableWidget::item {
    padding: 4px 6px;
}
QHeaderView::section {
    background-color: #ffffff;
    color: #7a8783;
    padding: 4px 6px;
    border: none;
    border-bottom: 1px solid #e3e8e6;
    font-weight: bold;
    font-size: 11px;
}
QStatusBar {
    background-color: #e9edeb;
    color: #7a8783;
    font-size: 11px;
}
"""
