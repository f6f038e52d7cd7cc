"""
Control panel with one slider per layout parameter.
"""
from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QSlider, QWidget

from svg_tiler.layout import PARAMETER_RANGES, LayoutParameters, ParameterRange

# Display order and labels, laid out in two columns
SLIDER_LABELS: Dict[str, str] = {
    "copies": "Copies",
    "rotation_degrees": "Rotation",
    "scale": "Scale",
    "rows": "Rows",
    "row_offset_px": "Row Offset",
    "horizontal_spacing_factor": "Horizontal Spacing",
    "vertical_spacing_factor": "Vertical Spacing",
}

INTEGER_FIELDS = {"copies", "rows", "row_offset_px"}


def _to_slider(value: float, bounds: ParameterRange) -> int:
    return round((value - bounds.minimum) / bounds.step)


def _from_slider(position: int, bounds: ParameterRange) -> float:
    return round(bounds.minimum + position * bounds.step, 6)


class ControlPanel(QGroupBox):
    """Seven sliders plus the one-line parameter summary."""

    # field name, new value
    parameterChanged = Signal(str, object)

    def __init__(self, parameters: Optional[LayoutParameters] = None, parent: Optional[QWidget] = None):
        super().__init__("Controls", parent)
        self.sliders: Dict[str, QSlider] = {}

        layout = QGridLayout(self)
        for index, (name, label) in enumerate(SLIDER_LABELS.items()):
            # Copies/Rotation/Scale in the first column, the rest in the second
            column = 0 if index < 3 else 1
            row = (index if index < 3 else index - 3) * 2

            bounds = PARAMETER_RANGES[name]
            slider = QSlider(Qt.Orientation.Horizontal)
            slider.setRange(0, _to_slider(bounds.maximum, bounds))
            slider.valueChanged.connect(lambda position, n=name: self._on_slider(n, position))

            layout.addWidget(QLabel(label), row, column)
            layout.addWidget(slider, row + 1, column)
            self.sliders[name] = slider

        self.summary = QLabel()
        self.summary.setWordWrap(True)
        layout.addWidget(self.summary, 8, 0, 1, 2)

        self.set_parameters(parameters or LayoutParameters())

    def set_parameters(self, parameters: LayoutParameters) -> None:
        """Move every slider to ``parameters`` without emitting changes."""
        for name, slider in self.sliders.items():
            slider.blockSignals(True)
            slider.setValue(_to_slider(getattr(parameters, name), PARAMETER_RANGES[name]))
            slider.blockSignals(False)
        self.summary.setText(parameters.describe())

    def value_of(self, name: str) -> float:
        """Current value represented by a slider."""
        value = _from_slider(self.sliders[name].value(), PARAMETER_RANGES[name])
        return int(value) if name in INTEGER_FIELDS else value

    def _on_slider(self, name: str, position: int) -> None:
        self.parameterChanged.emit(name, self.value_of(name))
