"""Named RGBA colors; a color is a Vector4 with components in [0, 1]."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from flowerkit.vector import Vector4

Color = Vector4

NAMED_COLORS: Mapping[str, Color] = MappingProxyType({
    "AliceBlue": Color(0.941176534, 0.972549081, 1.000000000, 1.0),
    "AntiqueWhite": Color(0.980392218, 0.921568692, 0.843137324, 1.0),
    "Aqua": Color(0.000000000, 1.000000000, 1.000000000, 1.0),
    "Aquamarine": Color(0.498039246, 1.000000000, 0.831372619, 1.0),
    "Azure": Color(0.941176534, 1.000000000, 1.000000000, 1.0),
    "Beige": Color(0.960784376, 0.960784376, 0.862745166, 1.0),
    "Bisque": Color(1.000000000, 0.894117713, 0.768627524, 1.0),
    "Black": Color(0.000000000, 0.000000000, 0.000000000, 1.0),
    "BlanchedAlmond": Color(1.000000000, 0.921568692, 0.803921640, 1.0),
    "Blue": Color(0.000000000, 0.000000000, 1.000000000, 1.0),
    "BlueViolet": Color(0.541176498, 0.168627456, 0.886274576, 1.0),
    "Brown": Color(0.647058845, 0.164705887, 0.164705887, 1.0),
    "BurlyWood": Color(0.870588303, 0.721568644, 0.529411793, 1.0),
    "CadetBlue": Color(0.372549027, 0.619607866, 0.627451003, 1.0),
    "Chartreuse": Color(0.498039246, 1.000000000, 0.000000000, 1.0),
    "Chocolate": Color(0.823529482, 0.411764741, 0.117647067, 1.0),
    "Coral": Color(1.000000000, 0.498039246, 0.313725501, 1.0),
    "CornflowerBlue": Color(0.392156899, 0.584313750, 0.929411829, 1.0),
    "Cornsilk": Color(1.000000000, 0.972549081, 0.862745166, 1.0),
    "Crimson": Color(0.862745166, 0.078431375, 0.235294133, 1.0),
    "Cyan": Color(0.000000000, 1.000000000, 1.000000000, 1.0),
    "DarkBlue": Color(0.000000000, 0.000000000, 0.545098066, 1.0),
    "DarkCyan": Color(0.000000000, 0.545098066, 0.545098066, 1.0),
    "DarkGoldenrod": Color(0.721568644, 0.525490224, 0.043137256, 1.0),
    "DarkGray": Color(0.662745118, 0.662745118, 0.662745118, 1.0),
    "DarkGreen": Color(0.000000000, 0.392156899, 0.000000000, 1.0),
    "DarkKhaki": Color(0.741176486, 0.717647076, 0.419607878, 1.0),
    "DarkMagenta": Color(0.545098066, 0.000000000, 0.545098066, 1.0),
    "DarkOliveGreen": Color(0.333333343, 0.419607878, 0.184313729, 1.0),
    "DarkOrange": Color(1.000000000, 0.549019635, 0.000000000, 1.0),
    "DarkOrchid": Color(0.600000024, 0.196078449, 0.800000072, 1.0),
    "DarkRed": Color(0.545098066, 0.000000000, 0.000000000, 1.0),
    "DarkSalmon": Color(0.913725555, 0.588235319, 0.478431404, 1.0),
    "DarkSeaGreen": Color(0.560784340, 0.737254918, 0.545098066, 1.0),
    "DarkSlateBlue": Color(0.282352954, 0.239215702, 0.545098066, 1.0),
    "DarkSlateGray": Color(0.184313729, 0.309803933, 0.309803933, 1.0),
    "DarkTurquoise": Color(0.000000000, 0.807843208, 0.819607913, 1.0),
    "DarkViolet": Color(0.580392182, 0.000000000, 0.827451050, 1.0),
    "DeepPink": Color(1.000000000, 0.078431375, 0.576470613, 1.0),
    "DeepSkyBlue": Color(0.000000000, 0.749019623, 1.000000000, 1.0),
    "DimGray": Color(0.411764741, 0.411764741, 0.411764741, 1.0),
    "DodgerBlue": Color(0.117647067, 0.564705908, 1.000000000, 1.0),
    "Firebrick": Color(0.698039234, 0.133333340, 0.133333340, 1.0),
    "FloralWhite": Color(1.000000000, 0.980392218, 0.941176534, 1.0),
    "ForestGreen": Color(0.133333340, 0.545098066, 0.133333340, 1.0),
    "Fuchsia": Color(1.000000000, 0.000000000, 1.000000000, 1.0),
    "Gainsboro": Color(0.862745166, 0.862745166, 0.862745166, 1.0),
    "GhostWhite": Color(0.972549081, 0.972549081, 1.000000000, 1.0),
    "Gold": Color(1.000000000, 0.843137324, 0.000000000, 1.0),
    "Goldenrod": Color(0.854902029, 0.647058845, 0.125490203, 1.0),
    "Gray": Color(0.501960814, 0.501960814, 0.501960814, 1.0),
    "Green": Color(0.000000000, 0.501960814, 0.000000000, 1.0),
    "GreenYellow": Color(0.678431392, 1.000000000, 0.184313729, 1.0),
    "Honeydew": Color(0.941176534, 1.000000000, 0.941176534, 1.0),
    "HotPink": Color(1.000000000, 0.411764741, 0.705882370, 1.0),
    "IndianRed": Color(0.803921640, 0.360784322, 0.360784322, 1.0),
    "Indigo": Color(0.294117659, 0.000000000, 0.509803951, 1.0),
    "Ivory": Color(1.000000000, 1.000000000, 0.941176534, 1.0),
    "Khaki": Color(0.941176534, 0.901960850, 0.549019635, 1.0),
    "Lavender": Color(0.901960850, 0.901960850, 0.980392218, 1.0),
    "LavenderBlush": Color(1.000000000, 0.941176534, 0.960784376, 1.0),
    "LawnGreen": Color(0.486274540, 0.988235354, 0.000000000, 1.0),
    "LemonChiffon": Color(1.000000000, 0.980392218, 0.803921640, 1.0),
    "LightBlue": Color(0.678431392, 0.847058892, 0.901960850, 1.0),
    "LightCoral": Color(0.941176534, 0.501960814, 0.501960814, 1.0),
    "LightCyan": Color(0.878431439, 1.000000000, 1.000000000, 1.0),
    "LightGoldenrodYellow": Color(0.980392218, 0.980392218, 0.823529482, 1.0),
    "LightGreen": Color(0.564705908, 0.933333397, 0.564705908, 1.0),
    "LightGray": Color(0.827451050, 0.827451050, 0.827451050, 1.0),
    "LightPink": Color(1.000000000, 0.713725507, 0.756862819, 1.0),
    "LightSalmon": Color(1.000000000, 0.627451003, 0.478431404, 1.0),
    "LightSeaGreen": Color(0.125490203, 0.698039234, 0.666666687, 1.0),
    "LightSkyBlue": Color(0.529411793, 0.807843208, 0.980392218, 1.0),
    "LightSlateGray": Color(0.466666698, 0.533333361, 0.600000024, 1.0),
    "LightSteelBlue": Color(0.690196097, 0.768627524, 0.870588303, 1.0),
    "LightYellow": Color(1.000000000, 1.000000000, 0.878431439, 1.0),
    "Lime": Color(0.000000000, 1.000000000, 0.000000000, 1.0),
    "LimeGreen": Color(0.196078449, 0.803921640, 0.196078449, 1.0),
    "Linen": Color(0.980392218, 0.941176534, 0.901960850, 1.0),
    "Magenta": Color(1.000000000, 0.000000000, 1.000000000, 1.0),
    "Maroon": Color(0.501960814, 0.000000000, 0.000000000, 1.0),
    "MediumAquamarine": Color(0.400000036, 0.803921640, 0.666666687, 1.0),
    "MediumBlue": Color(0.000000000, 0.000000000, 0.803921640, 1.0),
    "MediumOrchid": Color(0.729411781, 0.333333343, 0.827451050, 1.0),
    "MediumPurple": Color(0.576470613, 0.439215720, 0.858823597, 1.0),
    "MediumSeaGreen": Color(0.235294133, 0.701960802, 0.443137288, 1.0),
    "MediumSlateBlue": Color(0.482352972, 0.407843173, 0.933333397, 1.0),
    "MediumSpringGreen": Color(0.000000000, 0.980392218, 0.603921592, 1.0),
    "MediumTurquoise": Color(0.282352954, 0.819607913, 0.800000072, 1.0),
    "MediumVioletRed": Color(0.780392230, 0.082352944, 0.521568656, 1.0),
    "MidnightBlue": Color(0.098039225, 0.098039225, 0.439215720, 1.0),
    "MintCream": Color(0.960784376, 1.000000000, 0.980392218, 1.0),
    "MistyRose": Color(1.000000000, 0.894117713, 0.882353008, 1.0),
    "Moccasin": Color(1.000000000, 0.894117713, 0.709803939, 1.0),
    "NavajoWhite": Color(1.000000000, 0.870588303, 0.678431392, 1.0),
    "Navy": Color(0.000000000, 0.000000000, 0.501960814, 1.0),
    "OldLace": Color(0.992156923, 0.960784376, 0.901960850, 1.0),
    "Olive": Color(0.501960814, 0.501960814, 0.000000000, 1.0),
    "OliveDrab": Color(0.419607878, 0.556862772, 0.137254909, 1.0),
    "Orange": Color(1.000000000, 0.647058845, 0.000000000, 1.0),
    "OrangeRed": Color(1.000000000, 0.270588249, 0.000000000, 1.0),
    "Orchid": Color(0.854902029, 0.439215720, 0.839215755, 1.0),
    "PaleGoldenrod": Color(0.933333397, 0.909803987, 0.666666687, 1.0),
    "PaleGreen": Color(0.596078455, 0.984313786, 0.596078455, 1.0),
    "PaleTurquoise": Color(0.686274529, 0.933333397, 0.933333397, 1.0),
    "PaleVioletRed": Color(0.858823597, 0.439215720, 0.576470613, 1.0),
    "PapayaWhip": Color(1.000000000, 0.937254965, 0.835294187, 1.0),
    "PeachPuff": Color(1.000000000, 0.854902029, 0.725490212, 1.0),
    "Peru": Color(0.803921640, 0.521568656, 0.247058839, 1.0),
    "Pink": Color(1.000000000, 0.752941251, 0.796078503, 1.0),
    "Plum": Color(0.866666734, 0.627451003, 0.866666734, 1.0),
    "PowderBlue": Color(0.690196097, 0.878431439, 0.901960850, 1.0),
    "Purple": Color(0.501960814, 0.000000000, 0.501960814, 1.0),
    "Red": Color(1.000000000, 0.000000000, 0.000000000, 1.0),
    "RosyBrown": Color(0.737254918, 0.560784340, 0.560784340, 1.0),
    "RoyalBlue": Color(0.254901975, 0.411764741, 0.882353008, 1.0),
    "SaddleBrown": Color(0.545098066, 0.270588249, 0.074509807, 1.0),
    "Salmon": Color(0.980392218, 0.501960814, 0.447058856, 1.0),
    "SandyBrown": Color(0.956862807, 0.643137276, 0.376470625, 1.0),
    "SeaGreen": Color(0.180392161, 0.545098066, 0.341176480, 1.0),
    "SeaShell": Color(1.000000000, 0.960784376, 0.933333397, 1.0),
    "Sienna": Color(0.627451003, 0.321568638, 0.176470593, 1.0),
    "Silver": Color(0.752941251, 0.752941251, 0.752941251, 1.0),
    "SkyBlue": Color(0.529411793, 0.807843208, 0.921568692, 1.0),
    "SlateBlue": Color(0.415686309, 0.352941185, 0.803921640, 1.0),
    "SlateGray": Color(0.439215720, 0.501960814, 0.564705908, 1.0),
    "Snow": Color(1.000000000, 0.980392218, 0.980392218, 1.0),
    "SpringGreen": Color(0.000000000, 1.000000000, 0.498039246, 1.0),
    "SteelBlue": Color(0.274509817, 0.509803951, 0.705882370, 1.0),
    "Tan": Color(0.823529482, 0.705882370, 0.549019635, 1.0),
    "Teal": Color(0.000000000, 0.501960814, 0.501960814, 1.0),
    "Thistle": Color(0.847058892, 0.749019623, 0.847058892, 1.0),
    "Tomato": Color(1.000000000, 0.388235331, 0.278431386, 1.0),
    "Transparent": Color(0.000000000, 0.000000000, 0.000000000, 0.0),
    "Turquoise": Color(0.250980407, 0.878431439, 0.815686345, 1.0),
    "Violet": Color(0.933333397, 0.509803951, 0.933333397, 1.0),
    "Wheat": Color(0.960784376, 0.870588303, 0.701960802, 1.0),
    "White": Color(1.000000000, 1.000000000, 1.000000000, 1.0),
    "WhiteSmoke": Color(0.960784376, 0.960784376, 0.960784376, 1.0),
    "Yellow": Color(1.000000000, 1.000000000, 0.000000000, 1.0),
    "YellowGreen": Color(0.603921592, 0.803921640, 0.196078449, 1.0),
})


def _key(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


_BY_KEY = {_key(name): color for name, color in NAMED_COLORS.items()}


def color_by_name(name: str) -> Color:
    """Look up a named color; case, spaces and underscores are ignored."""
    try:
        return _BY_KEY[_key(name)]
    except KeyError:
        raise KeyError(f"unknown color name: {name!r}") from None


BLACK = NAMED_COLORS["Black"]
WHITE = NAMED_COLORS["White"]
TRANSPARENT = NAMED_COLORS["Transparent"]
RED = NAMED_COLORS["Red"]
GREEN = NAMED_COLORS["Green"]
BLUE = NAMED_COLORS["Blue"]
YELLOW = NAMED_COLORS["Yellow"]
PURPLE = NAMED_COLORS["Purple"]
MEDIUM_PURPLE = NAMED_COLORS["MediumPurple"]
ALICE_BLUE = NAMED_COLORS["AliceBlue"]
AQUA = NAMED_COLORS["Aqua"]
MINT_CREAM = NAMED_COLORS["MintCream"]
LIGHT_CORAL = NAMED_COLORS["LightCoral"]
CADET_BLUE = NAMED_COLORS["CadetBlue"]