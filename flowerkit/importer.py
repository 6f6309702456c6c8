"""Pieces of the model importer that work without a scene loader.

This covers command-line parsing, the value conversions applied to imported
data, and the naming and extraction of textures embedded in a model file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from flowerkit.colors import Color
from flowerkit.vector import Vector2, Vector3

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)

_FORMAT_EXTENSIONS = {"jpg": ".jpg", "png": ".png"}


def _atof(text: str) -> float:
    """Parse the leading number of text, or 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


@dataclass
class Arguments:
    """Input model, output model and the scale applied to positions."""

    input_file_name: Path
    output_file_name: Path
    scale: float = 1.0

    def __post_init__(self) -> None:
        self.input_file_name = Path(self.input_file_name)
        self.output_file_name = Path(self.output_file_name)
        self.scale = float(self.scale)


@dataclass(frozen=True)
class EmbeddedTexture:
    """A compressed texture stored inside a model file."""

    format_hint: str
    data: bytes = b""
    height: int = 0

    @property
    def width(self) -> int:
        """Size of the compressed data in bytes."""
        return len(self.data)

    def extension(self) -> str:
        """The file extension matching the texture's format."""
        try:
            return _FORMAT_EXTENSIONS[self.format_hint]
        except KeyError:
            raise ValueError(
                f"unrecognized texture format: {self.format_hint!r}"
            ) from None


def parse_args(argv: Sequence[str]) -> Arguments:
    """Parse arguments (without the program name): [-scale N] input output."""
    args = list(argv)
    if len(args) < 2:
        raise ValueError("Not enough arguments, import fbx failed!")

    scale = 1.0
    skip = False
    # Options are read from everything before the last two arguments; an
    # option's value may itself be the input file name.
    for option, value in zip(args[:-2], args[1:]):
        if skip:
            skip = False
            continue
        if option == "-scale":
            scale = _atof(value)
            skip = True

    return Arguments(Path(args[-2]), Path(args[-1]), scale)


def to_vector3(v: Iterable[float]) -> Vector3:
    """A Vector3 from the first three components of v."""
    x, y, z, *_ = v
    return Vector3(float(x), float(y), float(z))


def to_tex_coord(v: Iterable[float]) -> Vector2:
    """A texture coordinate from the first two components of v."""
    u, w, *_ = v
    return Vector2(float(u), float(w))


def to_color(c: Iterable[float]) -> Color:
    """An opaque color from the red, green and blue components of c."""
    r, g, b, *_ = c
    return Color(float(r), float(g), float(b), 1.0)


def export_embedded_texture(
    texture: EmbeddedTexture, args: Arguments, file_name: Union[str, Path]
) -> Path:
    """Write the texture's data next to the output model and return its path."""
    print(f"Extracting embedded texture {file_name}")

    output = args.output_file_name.as_posix()
    directory = output[: output.rfind("/") + 1]
    target = Path(directory + Path(file_name).name)

    with open(target, "wb") as stream:
        written = stream.write(texture.data)
    if written != texture.width:
        raise OSError("failed to extract embedded texture")
    return target


def embedded_texture_name(
    args: Arguments,
    suffix: str,
    texture_path: str,
    material_index: int,
    texture: Optional[EmbeddedTexture],
) -> str:
    """The file name a material's texture is saved under.

    A path of the form "*N" refers to an embedded texture by index; any other
    path refers to an embedded texture by name when texture is given, and to
    an external file otherwise.
    """
    stem = str(args.input_file_name)[:-4]

    if texture_path.startswith("*"):
        if texture is None:
            raise ValueError("no embedded texture found")
        if texture.height != 0:
            raise ValueError("uncompressed texture found")
        name = stem + suffix + texture_path[1:2] + texture.extension()
    elif texture is not None:
        name = stem + suffix + f"_{material_index}" + Path(texture_path).suffix
    else:
        name = Path(texture_path).name

    print(f"Adding texture {name}")
    return Path(name).name