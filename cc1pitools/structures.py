"""Configuration records for cuts, multi-bin histogram layouts and generators."""

from __future__ import annotations

from dataclasses import dataclass, field

# Colour index that ROOT assigns to plain blue.
_ROOT_BLUE = 600


@dataclass
class Cut:
    """Names of the containment and final-state selections applied to an event."""

    containment_cut: str = "not_def"
    final_state_cut: str = "not_def"


@dataclass
class DrawSettings:
    """Canvas and pad margins, spacings and axis settings for multi-pad plots."""

    l_margin: float = 0.12
    l_margin_not_shared: float = 0.06
    l_margin_not_shared_norm: float = 0.06
    r_margin: float = 0.05
    b_margin: float = 0.12
    t_margin: float = 0.05
    v_spacing: float = 0.01
    h_spacing: float = 0.01

    pad_right_margin: float = 0.02
    pad_left_margin: float = 0.02
    pad_left_margin_not_shared: float = 0.16
    pad_left_margin_not_shared_norm: float = 0.23
    pad_left_margin_shared_correction: float = 0.04
    pad_top_margin: float = 0.04
    pad_bottom_margin: float = 0.04
    pad_bottom_margin_not_shared: float = 0.12
    pad_bottom_margin_shared_correction: float = 0.06

    n_divisions_x: int = 510
    n_divisions_y: int = 507

    y_scaling: float = 1.2
    legend_x_pos: float = 0.65


@dataclass
class MultiBinInformation:
    """The variable that splits the data into separate pads."""

    bin_data_type: str = "ThetaMu"
    title: str = "#theta_{#mu}"
    unit: str = "[#circ]"
    low_bin: float = 0.0
    up_bin: float = 180.0


@dataclass
class LocalBinInformation:
    """The variable histogrammed inside each pad."""

    fill_data_type: str = "ThetaMu"
    title: str = "#theta_{#mu}"
    n_bins: int = 90
    low_bin: float = 0.0
    up_bin: float = 180.0


@dataclass
class MultiTH1:
    """Full description of a grid of one-dimensional histograms."""

    n_multibin_x: int = 3
    n_multibin_y: int = 3
    x_axis_shared: bool = False
    y_axis_shared: bool = False
    final_state_cut: str = "CC1Pi"
    multibin_info: MultiBinInformation = field(default_factory=MultiBinInformation)
    local_bin_info: LocalBinInformation = field(default_factory=LocalBinInformation)
    draw_settings: DrawSettings = field(default_factory=DrawSettings)
    normalize: bool = True


@dataclass
class GeneratorInformation:
    """Which event generator produced a file and how to colour its histograms."""

    generator_type: str = "Genie"
    file_name: str = "analysisOutput.root"
    hist_color: int = _ROOT_BLUE