"""Geometry of a grid of histogram pads and the labels and paths that go with it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cc1pitools.structures import MultiTH1


@dataclass(frozen=True)
class PadGeometry:
    """One pad of a canvas grid, in normalised canvas coordinates, with its margins."""

    name: str
    column: int
    row: int
    xlow: float
    ylow: float
    xup: float
    yup: float
    left_margin: float
    right_margin: float
    bottom_margin: float
    top_margin: float

    @property
    def width(self) -> float:
        """Width of the pad as a fraction of the canvas."""
        return self.xup - self.xlow

    @property
    def height(self) -> float:
        """Height of the pad as a fraction of the canvas."""
        return self.yup - self.ylow


@dataclass(frozen=True)
class EffectiveMargins:
    """Margins, spacings and pad steps actually used for a multi-histogram canvas."""

    l_margin: float
    r_margin: float
    b_margin: float
    t_margin: float
    v_spacing: float
    h_spacing: float
    pr: float
    pl: float
    pt: float
    pb: float
    pl_scorr: float
    pb_scorr: float
    h_step: float
    v_step: float


def _step(extent_margin_a: float, extent_margin_b: float, n: int, spacing: float) -> float:
    return (1.0 - extent_margin_a - extent_margin_b - (n - 1) * spacing) / n


def canvas_partition(
    nx: int,
    ny: int,
    l_margin: float,
    r_margin: float,
    b_margin: float,
    t_margin: float,
    v_spacing: float,
    h_spacing: float,
    pr: float,
    pl: float,
    pt: float,
    pb: float,
    pl_scorr: float,
    pb_scorr: float,
    x_axis_shared: bool,
    y_axis_shared: bool,
) -> list[PadGeometry]:
    """Split a canvas into an nx by ny grid of pads, column by column.

    With a shared y axis the first column is widened to the left by pl_scorr and
    given a larger left margin so its frame lines up with the others; a shared
    x axis does the same for the bottom row.
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"grid must have at least one pad in each direction, got {nx}x{ny}")

    v_step = _step(b_margin, t_margin, ny, v_spacing)
    h_step = _step(l_margin, r_margin, nx, h_spacing)

    left_adjust = 1 - h_step / (h_step + pl_scorr) * (1 - pl)
    bottom_adjust = 1 - v_step / (v_step + pb_scorr) * (1 - pb)

    pads: list[PadGeometry] = []
    hposr = 0.0
    for i in range(nx):
        if i == 0:
            hposl = l_margin - pl_scorr if y_axis_shared else l_margin
            hposr = l_margin + h_step
        else:
            hposl = hposr + h_spacing
            hposr = hposl + h_step

        vposu = 0.0
        for j in range(ny):
            if j == 0:
                vposd = b_margin - pb_scorr if x_axis_shared else b_margin
                vposu = b_margin + v_step
            else:
                vposd = vposu + v_spacing
                vposu = vposd + v_step

            left = left_adjust if (y_axis_shared and i == 0) else pl
            bottom = bottom_adjust if (x_axis_shared and j == 0) else pb
            pads.append(
                PadGeometry(
                    name=f"pad_{i}_{j}",
                    column=i,
                    row=j,
                    xlow=hposl,
                    ylow=vposd,
                    xup=hposr,
                    yup=vposu,
                    left_margin=left,
                    right_margin=pr,
                    bottom_margin=bottom,
                    top_margin=pt,
                )
            )
    return pads


def x_to_pad(x: float, pad: PadGeometry) -> float:
    """Map a fraction x of the pad's frame width to a fraction of the whole pad."""
    pw = pad.width
    if pw == 0:
        raise ValueError(f"pad {pad.name} has zero width")
    lm = pad.left_margin
    fw = pw - pw * lm - pw * pad.right_margin
    return (x * fw + pw * lm) / pw


def y_to_pad(y: float, pad: PadGeometry) -> float:
    """Map a fraction y of the pad's frame height to a fraction of the whole pad."""
    ph = pad.height
    if ph == 0:
        raise ValueError(f"pad {pad.name} has zero height")
    bm = pad.bottom_margin
    fh = ph - ph * bm - ph * pad.top_margin
    return (y * fh + bm * ph) / ph


def effective_margins(mth1: MultiTH1) -> EffectiveMargins:
    """Work out the margins a plot uses, given which axes are shared and normalisation."""
    ds = mth1.draw_settings
    nx, ny = mth1.n_multibin_x, mth1.n_multibin_y
    if nx < 1 or ny < 1:
        raise ValueError(f"grid must have at least one pad in each direction, got {nx}x{ny}")

    l_margin = ds.l_margin
    pl = ds.pad_left_margin
    pb = ds.pad_bottom_margin

    if mth1.normalize:
        pl_not_shared = ds.pad_left_margin_not_shared_norm
        l_margin_not_shared = ds.l_margin_not_shared_norm
    else:
        pl_not_shared = ds.pad_left_margin_not_shared
        l_margin_not_shared = ds.l_margin_not_shared

    if not mth1.y_axis_shared:
        pl = pl_not_shared
        l_margin = l_margin_not_shared
    if not mth1.x_axis_shared:
        pb = ds.pad_bottom_margin_not_shared

    return EffectiveMargins(
        l_margin=l_margin,
        r_margin=ds.r_margin,
        b_margin=ds.b_margin,
        t_margin=ds.t_margin,
        v_spacing=ds.v_spacing,
        h_spacing=ds.h_spacing,
        pr=ds.pad_right_margin,
        pl=pl,
        pt=ds.pad_top_margin,
        pb=pb,
        pl_scorr=ds.pad_left_margin_shared_correction,
        pb_scorr=ds.pad_bottom_margin_shared_correction,
        h_step=_step(l_margin, ds.r_margin, nx, ds.h_spacing),
        v_step=_step(ds.b_margin, ds.t_margin, ny, ds.v_spacing),
    )


def multibin_label(mth1: MultiTH1, index: int) -> str:
    """Return the label naming the range of the splitting variable shown in a pad."""
    n_multibins = mth1.n_multibin_x * mth1.n_multibin_y
    if not 0 <= index < n_multibins:
        raise ValueError(f"multi-bin index {index} outside 0..{n_multibins - 1}")
    info = mth1.multibin_info
    step = (info.up_bin - info.low_bin) / n_multibins
    interval = f" [{step * index:2.1f}, {step * (index + 1):2.1f}]"
    return f"{info.title} #in {interval}{info.unit}"


def output_path(mth1: MultiTH1, base_dir: str | Path) -> Path:
    """Return the path, without extension, under which a multi-histogram plot is saved."""
    x_shared = "xS" if mth1.x_axis_shared else "xNotS"
    y_shared = "yS" if mth1.y_axis_shared else "yNotS"
    norm = "N" if mth1.normalize else "NotN"
    folder = f"MultiBin_{mth1.multibin_info.bin_data_type}"
    stem = (
        f"{mth1.local_bin_info.fill_data_type}_"
        f"{mth1.n_multibin_x}x{mth1.n_multibin_y}_"
        f"{norm}_{x_shared}_{y_shared}"
    )
    return Path(base_dir) / folder / mth1.final_state_cut / stem


def histogram_bin_edges(mth1: MultiTH1) -> list[float]:
    """Return the bin edges of the histogram filled inside each pad."""
    info = mth1.local_bin_info
    n_bins = int(info.n_bins)
    if n_bins < 1:
        raise ValueError(f"histogram needs at least one bin, got {info.n_bins}")
    if info.up_bin <= info.low_bin:
        raise ValueError(
            f"upper edge {info.up_bin} must exceed lower edge {info.low_bin}"
        )
    width = (info.up_bin - info.low_bin) / n_bins
    return [info.low_bin + k * width for k in range(n_bins)] + [float(info.up_bin)]