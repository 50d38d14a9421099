"""
Pytest configuration for local imports and shared test styles.
"""

# Standard Library
import dataclasses
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()


@dataclasses.dataclass(eq=False)
class FixedPitchStyle:
	"""
	Style where every character is char_width wide; counts measurements.
	"""

	char_width: float = 1.0
	avg_width: float = 1.0
	ascent_value: float = 8.0
	descent_value: float = 2.0
	leading_value: float = 2.0
	measure_calls: int = 0

	def string_width(self, text: str) -> float:
		self.measure_calls += 1
		return len(text) * self.char_width

	def ascent(self) -> float:
		return self.ascent_value

	def descent(self) -> float:
		return self.descent_value

	def leading(self) -> float:
		return self.leading_value

	def line_height(self) -> float:
		return self.ascent_value + self.descent_value + self.leading_value

	def avg_char_width(self) -> float:
		return self.avg_width


#============================================
@pytest.fixture
def fixed_style() -> FixedPitchStyle:
	"""
	A fresh fixed-pitch style with a 12 point line pitch.
	"""
	return FixedPitchStyle()
