"""
Alignment policy: padding around a block and per-line offsets.
"""

# Standard Library
import dataclasses

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.config
import pdf_text_flow.geometry


Size = ptf.geometry.Size
Padding = ptf.geometry.Padding

HORIZONTAL_ALIGNS = ptf.config.HORIZONTAL_ALIGNS
VERTICAL_ALIGNS = ptf.config.VERTICAL_ALIGNS


#============================================
def compute_align_offset(available: float, used: float, align: str) -> float:
	"""
	Compute the leading space before an item along one axis.

	Offsets are measured from the left edge or from the top edge, so LEFT
	and TOP never move the item.

	Args:
		available: Available dimension.
		used: Dimension taken by the item.
		align: Alignment string.

	Returns:
		Offset in points, never negative.
	"""
	normalized = align.strip().upper()
	if normalized in ("LEFT", "TOP", "JUSTIFY"):
		return 0.0
	if normalized in ("RIGHT", "BOTTOM"):
		return max(0.0, available - used)
	return max(0.0, (available - used) / 2.0)


@dataclasses.dataclass(frozen=True)
class Align:
	horizontal: str = "LEFT"
	vertical: str = "TOP"

	def __post_init__(self) -> None:
		if self.horizontal not in HORIZONTAL_ALIGNS:
			raise ValueError(f"Unknown horizontal alignment: {self.horizontal}")
		if self.vertical not in VERTICAL_ALIGNS:
			raise ValueError(f"Unknown vertical alignment: {self.vertical}")

	def calc_padding(self, outer: Size, inner: Size) -> Padding:
		"""
		Distribute the space an inner box leaves inside an outer box.

		Args:
			outer: Outer box size.
			inner: Inner box size.

		Returns:
			Padding placing the inner box per this alignment.
		"""
		left = compute_align_offset(outer.width, inner.width, self.horizontal)
		top = compute_align_offset(outer.height, inner.height, self.vertical)
		right = max(0.0, outer.width - inner.width - left)
		bottom = max(0.0, outer.height - inner.height - top)
		return Padding(top=top, right=right, bottom=bottom, left=left)

	def left_offset(self, total_width: float, item_width: float) -> float:
		return compute_align_offset(total_width, item_width, self.horizontal)


DEFAULT_ALIGN = Align("LEFT", "TOP")


#============================================
def parse_align(value: str) -> Align:
	"""
	Parse an alignment name such as "TOP_LEFT", "MIDDLE_CENTER" or "RIGHT".

	A lone horizontal name keeps TOP; a lone vertical name keeps LEFT;
	"CENTER" alone centers on both axes.

	Args:
		value: Alignment name, case insensitive.

	Returns:
		Align.
	"""
	normalized = value.strip().upper().replace("-", "_")
	if normalized == "CENTER":
		return Align("CENTER", "MIDDLE")
	parts = normalized.split("_")
	horizontal = "LEFT"
	vertical = "TOP"
	for part in parts:
		if part in HORIZONTAL_ALIGNS:
			horizontal = part
		elif part in VERTICAL_ALIGNS:
			vertical = part
		else:
			raise ValueError(f"Unknown alignment: {value}")
	return Align(horizontal, vertical)
