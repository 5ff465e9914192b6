"""Numeric constants, scalar helpers and colour-space conversions.

The spectral tables sample the visible range at 30 wavelengths between
405 nm and 695 nm. They hold the CIE matching functions and the basis
spectra used to turn RGB reflectances and illuminants into spectra.
"""

from __future__ import annotations

from collections.abc import Sequence

PI_F = 3.141592654
HALF_PI_F = 0.5 * PI_F
QUARTER_PI_F = 0.25 * PI_F
TWO_PI_F = 2.0 * PI_F
INV_PI_F = 0.31830988618379067154
INV_TWO_PI_F = 0.15915494309189533577
FOUR_PI_F = 4.0 * PI_F
INV_4_PI_F = 1.0 / FOUR_PI_F
EULER_F = 2.718281828
RAD_F = 57.29577951308232
TWO_RAD_F = 2.0 * RAD_F
DEG_TO_RAD = 1.0 / RAD_F
FLT_MAX = 3.4028234663852886e38
INF_MIN = -FLT_MAX
INF_MAX = FLT_MAX
RAY_MIN = -100000.0
RAY_MAX = 100000.0
EULER_E_F = 2.71828182845904523536
MAX_CHAR_SIZE = 128
MAX_BXDFS = 4
NO_HIT = -1
NO_NODE_ID = -1
HISTOGRAM_NUM_BINS = 250
WHITESPACE = " \t\n\r"
MAX_NO_TF_POINTS = 20
MAX_NO_VOLUME_LIGHTS = 3
MAX_BOKEH_DATA = 12
IMPORT_PROGRESS_UPDATE_INTERVAL = 500
MB = 1024.0 ** 2

N_SPECTRAL_SAMPLES = 30

CIE_X = (
    0.0253, 0.0815, 0.2125, 0.3243, 0.3461, 0.3168,
    0.2480, 0.1432, 0.0600, 0.0160, 0.0040, 0.0316,
    0.1113, 0.2265, 0.3604, 0.5127, 0.6784, 0.8414,
    0.9761, 1.0523, 1.0409, 0.9351, 0.7504, 0.5429,
    0.3625, 0.2206, 0.1229, 0.0648, 0.0336, 0.0162,
)

CIE_Y = (
    0.0007, 0.0023, 0.0075, 0.0170, 0.0300, 0.0483,
    0.0744, 0.1134, 0.1708, 0.2608, 0.4091, 0.6077,
    0.7909, 0.9126, 0.9783, 0.9983, 0.9769, 0.9139,
    0.8153, 0.6946, 0.5668, 0.4415, 0.3217, 0.2180,
    0.1392, 0.0824, 0.0452, 0.0236, 0.0122, 0.0059,
)

CIE_Z = (
    0.1202, 0.3901, 1.0293, 1.6036, 1.7748, 1.7358,
    1.5092, 1.0446, 0.6242, 0.3585, 0.2130, 0.1140,
    0.0582, 0.0303, 0.0138, 0.0059, 0.0028, 0.0018,
    0.0014, 0.0010, 0.0006, 0.0002, 0.0001, 0.0000,
    0.0000, 0.0000, 0.0000, 0.0000, 0.0000, 0.0000,
)

CIE_LAMBDA = tuple(405.0 + 10.0 * i for i in range(N_SPECTRAL_SAMPLES))
RGB_TO_SPECTRUM_LAMBDA = CIE_LAMBDA

RGB_REFL_TO_SPECT_WHITE = (
    1.0617, 1.0622, 1.0623, 1.0625, 1.0624, 1.0625,
    1.0625, 1.0625, 1.0622, 1.0617, 1.0612, 1.0612,
    1.0614, 1.0615, 1.0620, 1.0625, 1.0625, 1.0625,
    1.0625, 1.0625, 1.0625, 1.0625, 1.0625, 1.0624,
    1.0624, 1.0623, 1.0612, 1.0598, 1.0599, 1.0602,
)

RGB_REFL_TO_SPECT_CYAN = (
    1.0196, 1.0279, 1.0156, 1.0388, 1.0447, 1.0499,
    1.0284, 1.0353, 1.0492, 1.0533, 1.0536, 1.0535,
    1.0535, 1.0528, 1.0533, 1.0548, 1.0547, 1.0351,
    0.7535, 0.3568, 0.0836, -0.0043, -0.0028, -0.0059,
    -0.0018, 0.0022, 0.0091, -0.0001, 0.0117, 0.0086,
)

RGB_REFL_TO_SPECT_MAGENTA = (
    0.9870, 1.0012, 1.0177, 1.0176, 1.0192, 1.0025,
    1.0064, 1.0146, 0.8028, 0.3308, 0.0053, 0.0053,
    0.0022, -0.0016, -0.0065, 0.0011, 0.0111, 0.1780,
    0.5042, 0.8378, 0.9734, 0.9914, 1.0106, 0.9850,
    0.9297, 0.8750, 0.9371, 0.9511, 0.9798, 0.9029,
)

RGB_REFL_TO_SPECT_YELLOW = (
    -0.0056, -0.0063, -0.0054, -0.0003, 0.0202, 0.0850,
    0.1839, 0.3113, 0.4637, 0.6388, 0.8147, 0.9597,
    1.0436, 1.0510, 1.0512, 1.0511, 1.0516, 1.0516,
    1.0513, 1.0512, 1.0514, 1.0516, 1.0515, 1.0515,
    1.0512, 1.0514, 1.0510, 1.0507, 1.0485, 1.0488,
)

RGB_REFL_TO_SPECT_RED = (
    0.1209, 0.1061, 0.0734, 0.0320, -0.0019, 0.0114,
    0.0090, 0.0106, 0.0024, -0.0040, -0.0053, -0.0080,
    -0.0051, -0.0098, -0.0075, -0.0022, 0.0044, 0.0144,
    0.4147, 0.8365, 0.9912, 0.9982, 0.9998, 0.9945,
    1.0009, 1.0039, 0.9893, 1.0019, 0.9827, 0.9813,
)

RGB_REFL_TO_SPECT_GREEN = (
    -0.0115, -0.0103, -0.0115, -0.0084, -0.0081, -0.0055,
    0.0527, 0.2842, 0.6002, 0.8550, 0.9772, 0.9986,
    0.9998, 0.9995, 0.9998, 0.9994, 0.9969, 0.9600,
    0.7327, 0.4067, 0.1300, 0.0042, -0.0035, -0.0051,
    -0.0072, -0.0088, -0.0086, -0.0084, -0.0077, -0.0022,
)

RGB_REFL_TO_SPECT_BLUE = (
    0.9952, 0.9945, 0.9935, 0.9993, 0.9998, 0.9991,
    0.9846, 0.8559, 0.6587, 0.4495, 0.2542, 0.1014,
    0.0177, 0.0010, -0.0004, -0.0002, 0.0015, 0.0032,
    0.0009, -0.0002, 0.0039, 0.0154, 0.0299, 0.0410,
    0.0490, 0.0496, 0.0487, 0.0409, 0.0323, 0.0237,
)

RGB_ILLUM_TO_SPECT_WHITE = (
    1.1563, 1.1558, 1.1563, 1.1567, 1.1568, 1.1568,
    1.1565, 1.1566, 1.1566, 1.1565, 1.1566, 1.1538,
    1.1442, 1.1338, 1.1298, 1.1218, 1.0651, 1.0455,
    1.0100, 0.9710, 0.9399, 0.9206, 0.9097, 0.8987,
    0.8942, 0.8882, 0.8828, 0.8801, 0.8773, 0.8789,
)

RGB_ILLUM_TO_SPECT_CYAN = (
    1.1349, 1.1357, 1.1357, 1.1361, 1.1362, 1.1364,
    1.1358, 1.1361, 1.1362, 1.1360, 1.1358, 1.1357,
    1.1361, 1.1356, 1.1353, 1.1328, 1.1039, 0.9485,
    0.7023, 0.4212, 0.1927, 0.0501, -0.0110, -0.0119,
    -0.0114, -0.0109, -0.0062, -0.0076, -0.0090, -0.0067,
)

RGB_ILLUM_TO_SPECT_MAGENTA = (
    1.0763, 1.0770, 1.0784, 1.0747, 1.0730, 1.0736,
    1.0799, 1.0825, 1.0105, 0.7600, 0.3661, 0.0628,
    0.0020, -0.0019, -0.0011, -0.0002, 0.0006, 0.0182,
    0.1837, 0.4220, 0.7250, 0.9775, 1.0747, 1.0815,
    1.0558, 1.0246, 1.0310, 1.0629, 1.0085, 1.0447,
)

RGB_ILLUM_TO_SPECT_YELLOW = (
    0.0001, 0.0002, -0.0002, -0.0001, -0.0002, 0.0022,
    0.0462, 0.3387, 0.7971, 1.0314, 1.0347, 1.0367,
    1.0365, 1.0366, 1.0368, 1.0366, 1.0364, 1.0366,
    1.0366, 1.0363, 1.0355, 1.0218, 0.9484, 0.8174,
    0.7260, 0.6567, 0.6107, 0.5971, 0.5934, 0.5737,
)

RGB_ILLUM_TO_SPECT_RED = (
    0.0593, 0.0541, 0.0455, 0.0372, 0.0249, 0.0080,
    0.0007, 0.0004, 0.0006, -0.0000, -0.0003, -0.0001,
    -0.0001, -0.0002, -0.0002, 0.0021, 0.0296, 0.1330,
    0.2924, 0.4850, 0.6716, 0.8183, 0.9156, 0.9691,
    0.9897, 0.9962, 0.9886, 0.9923, 0.9798, 0.9863,
)

RGB_ILLUM_TO_SPECT_GREEN = (
    0.0070, 0.0055, 0.0007, -0.0026, -0.0153, 0.0073,
    0.0138, 0.2188, 0.7212, 1.0245, 1.0326, 1.0334,
    1.0305, 1.0199, 1.0325, 1.0366, 1.0356, 1.0246,
    0.9748, 0.3835, -0.0019, 0.0035, 0.0046, 0.0066,
    0.0172, 0.0059, 0.0018, -0.0001, -0.0043, 0.0058,
)

RGB_ILLUM_TO_SPECT_BLUE = (
    1.0544, 1.0543, 1.0576, 1.0579, 1.0582, 1.0580,
    1.0567, 1.0567, 1.0485, 0.6948, 0.1966, 0.0022,
    -0.0014, -0.0014, -0.0014, -0.0015, 0.0005, -0.0009,
    -0.0014, -0.0016, -0.0015, 0.0037, 0.0175, 0.0465,
    0.0965, 0.1373, 0.1526, 0.1511, 0.1624, 0.1687,
)

# Luminance weights of the three tristimulus channels.
Y_WEIGHT = (0.212671, 0.715160, 0.072169)

_XYZ_TO_RGB = (
    (3.240479, -1.537150, -0.498535),
    (-0.969256, 1.875991, 0.041556),
    (0.055648, -0.204043, 1.057311),
)

_RGB_TO_XYZ = (
    (0.412453, 0.357580, 0.180423),
    (0.212671, 0.715160, 0.072169),
    (0.019334, 0.119193, 0.950227),
)


def lerp(t: float, v1: float, v2: float) -> float:
    """Linearly interpolate between ``v1`` (t=0) and ``v2`` (t=1)."""
    return (1.0 - t) * v1 + t * v2


def clamp(v: float, low: float, high: float) -> float:
    """Limit ``v`` to the range ``[low, high]``."""
    return max(low, min(v, high))


def _apply(matrix: tuple[tuple[float, float, float], ...], values: Sequence[float]) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    a, b, c = values
    r0, r1, r2 = (row[0] * a + row[1] * b + row[2] * c for row in matrix)
    return (r0, r1, r2)


def xyz_to_rgb(xyz: Sequence[float]) -> tuple[float, float, float]:
    """Convert a CIE XYZ triple to linear RGB."""
    return _apply(_XYZ_TO_RGB, xyz)


def rgb_to_xyz(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Convert a linear RGB triple to CIE XYZ."""
    return _apply(_RGB_TO_XYZ, rgb)