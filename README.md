# deepfry

Deepfry images by running a bit operation over the red, green and blue
channels of every pixel.

## Installation

```
pip install .
```

## Command line

```
deepfry INPUT OUTPUT -m MODE [-r RED] [-g GREEN] [-b BLUE]
deepfry INPUT OUTPUT -p PRESET.toml
```

- `-m` picks the change mode, written in kebab case: `shift-left`,
  `shift-right`, `not`, `multiply`, `sqrt`, `xor`, `or`, `and`, `exponent`,
  `random-add`, `random-mul`.
- `-r`, `-g` and `-b` are the operands used for each channel (default `1`,
  any integer from 0 to 4294967295).
- `-p` applies a preset file instead; when a preset is given, `-m`, `-r`,
  `-g` and `-b` are ignored.

Either a mode or a preset must be given. The input is converted to RGB
before processing; the output format follows the output file's extension.
Bad arguments exit with status 2; an unreadable input image, an invalid
preset or a failed save prints a message to standard error and exits with
status 1.

Mode notes: `shift-left` and `shift-right` use the operand modulo 8;
`multiply` requires an operand of at most 255; `xor`, `or` and `and` use the
low byte of the operand; `exponent` raises to the operand's power modulo 256;
`random-add` and `random-mul` use the operand as the seed of a
pseudo-random byte. `not` and `sqrt` ignore the operand.

### Presets

A preset is a TOML file listing algorithms to apply in order. Mode names in
presets are written in CamelCase:

```toml
[[algorithms]]
algorithm = "BitChange"
change_mode = "Xor"
red = 12
green = 200
blue = 7

[[algorithms]]
algorithm = "BitChange"
change_mode = "ShiftLeft"
red = 1
```

`BitChange` is the only algorithm. Missing channel values default to `0`.
Every entry is validated before any of them is applied.

## Library use

`deepfry.core.deepfry` returns a new RGB image; it does not modify its input.

```python
from PIL import Image
from deepfry.core import BitChange, ChangeMode, Preset, deepfry

image = Image.open("in.png")
image = deepfry(image, BitChange(ChangeMode.from_string("Xor"), 12, 200, 7))
image.save("out.png")

with open("preset.toml", encoding="utf-8") as fh:
    preset = Preset.from_toml(fh.read())
for config in preset.algorithms:
    image = deepfry(image, config.algo())
```

- `ChangeMode.shift(value, other)` applies a mode to a single byte.
- `ChangeMode.from_string(name)` looks a mode up by its CamelCase name and
  raises `ValueError` for an unknown one.
- `AlgorithmConfig.algo()` raises `ValueError` for an unknown algorithm, a
  missing or unknown change mode.

`deepfry.preview.start_deepfry(mode, red, green, blue, path)` opens an image,
deepfries it with operands of 0 to 255 and returns it as a
`data:image/png;base64,...` URL; `deepfry.preview.image_to_data_url(img)` does
the encoding step alone.

## What it does not do

There is no graphical interface: no window with mode picker, colour sliders
or file chooser. `deepfry.preview` provides the processing and data-URL
output such a screen would display, but no screen itself.