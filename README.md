# cc1pitools

Helpers for charged-current single-pion neutrino analyses: resonance
classification, branch layouts of analysis trees, heavy neutral lepton (HNL)
decay widths and kinematics, and the geometry of multi-panel histogram grids.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cc1pitools.structures` – dataclasses holding the analysis defaults: `Cut`,
  `DrawSettings`, `MultiBinInformation`, `LocalBinInformation`, `MultiTH1` and
  `GeneratorInformation`.
- `cc1pitools.resonance` – maps generator resonance codes to a compact index
  (`resonance_index`), and an index to its family (`resonance_family`, giving a
  `ResonanceFamily`), its short name (`resonance_name`) and its histogram title
  (`resonance_title`). `family_title` gives the title for the family indices
  0, 1 and 2. Unknown codes or indices raise `ValueError` in `resonance_index`,
  `resonance_family` and `resonance_name`; the two title functions return `""`.
- `cc1pitools.branches` – `Branch` (a name and a type, with `convert` and
  `read`), the layout of the reduced summary tree (`summary_branches`) and
  `select_branches`, which reads typed values out of a row mapping.
- `cc1pitools.truth_schema` – the truth part of the analyser event tree:
  `header_branches`, `generator_branches`, `geant4_branches`, and
  `truth_branches(available)`, which always includes the header and adds the
  generator and Geant4 blocks only when their marker branch is among the
  available names. `subrun_branches` gives the subrun tree layout.
- `cc1pitools.hnl_widths` – `PhysicsConstants` (masses, couplings and unit
  conversions, all supplied by the caller), `HNLWidths` with the partial widths
  of each channel (`channel_width`, `channels`, and the individual width
  methods), plus `kallen_lambda`, `forcedecay_weight` and `flat_to_exp_rand`.
  The phase-space integrals `i1` and `i2` use `scipy.integrate.quad`.
- `cc1pitools.hnl_decay` – `FourVector` with `boost` and `boost_vector`,
  `twobody_momentum`, `random_unit_vector`, `isotropic_threebody_momentum`,
  and `HNLMakeDecay`, configured by an `HNLDecayConfig`. It sums the total and
  selected widths, computes the reference decay weight (`max_weight`),
  generates `nu l+ l-` final states (`nu_dilep`) and `nu` plus a neutral
  pseudoscalar meson (`nu_p0`, for PDG 111, 221 or 331) as `DecayFinalState`
  objects for an `HNLFlux`, and picks a channel weighted by width
  (`pick_channel`). Randomness comes from any object with a `random()` method,
  such as `random.Random`.
- `cc1pitools.canvas_layout` – pad geometry for histogram grids
  (`canvas_partition` returning `PadGeometry` records, `x_to_pad`, `y_to_pad`),
  the margins a `MultiTH1` actually uses (`effective_margins`, returning
  `EffectiveMargins`), pad labels (`multibin_label`), the save path without
  extension (`output_path`) and histogram bin edges (`histogram_bin_edges`).

## Examples

```python
from cc1pitools.resonance import resonance_index, resonance_name, resonance_title

idx = resonance_index(2224)
print(resonance_name(idx))    # Delta (1232)
print(resonance_title(idx))   # #Delta^{++}(1232) resonance; E_{Nu}; Events
```

```python
from cc1pitools.canvas_layout import canvas_partition, effective_margins
from cc1pitools.structures import MultiTH1

mth1 = MultiTH1()
m = effective_margins(mth1)
pads = canvas_partition(
    mth1.n_multibin_x, mth1.n_multibin_y,
    m.l_margin, m.r_margin, m.b_margin, m.t_margin,
    m.v_spacing, m.h_spacing, m.pr, m.pl, m.pt, m.pb,
    m.pl_scorr, m.pb_scorr, mth1.x_axis_shared, mth1.y_axis_shared,
)
print([p.name for p in pads][:3])   # ['pad_0_0', 'pad_0_1', 'pad_0_2']
```

`HNLWidths` and `HNLMakeDecay` take a `PhysicsConstants` instance; the package
ships no values for it, so fill it in with the constants of your model.

## What the package does not do

- It does not open ROOT files or any other data files; the branch layouts only
  describe names and types, and `select_branches` works on rows you have
  already read into mappings.
- It has no layout for the reconstructed-slice branches of the event tree;
  `truth_branches` covers the header, generator and Geant4 blocks only.
- It draws nothing: the layout functions compute geometry, labels and paths,
  but no canvas, histogram or file is produced.
- `HNLMakeDecay` does not generate `l pi` final states or place the decay along
  a ray; it covers widths, weights, three-body and neutrino-plus-meson
  kinematics, and channel choice.
- There is no command-line program.