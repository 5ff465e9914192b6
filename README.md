# volrender

This package holds the data model behind an interactive volume renderer. It is pure Python and has no dependencies.

## Modules

- `volrender.color` provides numeric constants (`PI_F`, `INF_MAX`, `MB`, ...), the 30-sample CIE matching functions (`CIE_X`, `CIE_Y`, `CIE_Z`, `CIE_LAMBDA`) and the RGB-to-spectrum basis tables. It also has the helpers `lerp(t, v1, v2)` and `clamp(v, low, high)`, and the linear conversions `xyz_to_rgb(xyz)` and `rgb_to_xyz(rgb)`. Both conversions raise `ValueError` unless they get exactly three components.
- `volrender.spectrum` provides `ColorXyz`, an immutable tristimulus colour. It supports `+`, `-`, `*` and `/` with other colours or with scalars, equality and indexing. Its methods are `is_black()`, `clamp(low, high)`, `y()` (luminance), `to_rgb()`, `ColorXyz.from_xyz(x, y, z)` and `ColorXyz.from_rgb(r, g, b)`. `ColorXyza` adds a fourth component, exposed as `alpha`. The module also has `ColorType`, `SpectrumSample` and named colours such as `SPEC_BLACK`, `SPEC_WHITE` and `XYZA_BLACK`.
- `volrender.timing` provides `Timing`, which keeps up to 30 recent durations, newest first. `add_duration(duration)` updates `filtered_duration`, a moving average. If a `name` is given, it is printed when the object is created.
- `volrender.variance` provides `RunningVariance`, which keeps a running mean and variance for each pixel using Welford's method. Its methods are `resize(width, height)`, `reset()`, `push(x, index)`, `num_data_values(index)`, `mean(index)`, `variance(index)` and `standard_deviation(index)`. If you pass it a `Status`, resizing reports the buffer sizes as statistics.
- `volrender.status` provides `Status`, a publish/subscribe hub for the events in `Event`. Handlers are registered with `connect(event, handler)` and removed with `disconnect(event, handler)`. Events are sent with:
  - `set_render_begin()`
  - `set_render_end()`
  - `set_pre_render_frame()`
  - `set_post_render_frame()`
  - `set_render_pause(pause)`
  - `set_resize()`
  - `set_load_preset(preset_name)`
  - `set_statistic_changed(group, name, value, unit, icon)`

  A shared instance is available as `volrender.status.status`.
- `volrender.statistics` provides `StatisticsTree`, a tree of `StatisticItem` rows grouped under "Performance", "Volume", "Memory", "Camera" and "Graphics Card". `attach(status)` makes the tree follow render begin and end and statistic changes. When rendering ends, the tree collapses and the default groups are cleared.
- `volrender.transfer_function` provides `TransferFunction`, a list of `Node` objects kept sorted by intensity. Nodes are managed with `add_node`, `add_point`, `remove_node` and `node_changed`. Selection is handled by `set_selected_node`, `select_index`, `select_first_node`, `select_previous_node`, `select_next_node` and `select_last_node`. Setting `density_scale`, `shading_type` or `gradient_factor` also sends a change notification. Handlers for `TransferFunctionEvent.CHANGED` and `TransferFunctionEvent.SELECTION_CHANGED` are registered with `connect`. `TransferFunction.default()` builds the default four-node function. A shared instance is available as `volrender.transfer_function.transfer_function`.
- `volrender.canvas` provides the geometry for drawing a transfer function on a canvas:
  - `node_positions`
  - `edge_segments`
  - `fill_polygon`
  - `canvas_to_transfer`, which maps a view position to intensity and opacity
  - `remove_node_at`, which never removes the first or last node

  `VIEW_MARGIN` is the editor's margin.
- `volrender.utilities` provides `Margin`, `format_vector(vector, precision)` and `format_size(size, precision)`.

## Installation

```
pip install .
```

## Example

```python
from volrender.transfer_function import TransferFunction
from volrender.canvas import fill_polygon

tf = TransferFunction.default()
print([node.intensity for node in tf.nodes])   # [0.0, 0.3, 0.7, 1.0]
print(fill_polygon(tf, 200, 100))
```

## What this package does not do

This package does not render anything:

- It has no GPU path tracer.
- It has no volume file loading.
- It has no window, widgets or other graphical editor.
- It does not read or write presets, so transfer functions cannot be saved to or loaded from files.
- It provides no command-line program.

It supplies only the model objects and geometry that such parts would be built on.

## Running the tests

```
pip install .[test]
pytest
```