#perlin.py

import math
import constants as C

# Ken Perlin's reference permutation of 0..255.
PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69,
    142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219,
    203, 117, 35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230,
    220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76,
    132, 187, 208, 89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173,
    186, 3, 64, 52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206,
    59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163,
    70, 221, 153, 101, 155, 167, 43, 172, 9, 129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232,
    178, 185, 112, 104, 218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162,
    241, 81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204,
    176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141,
    128, 195, 78, 66, 215, 61, 156, 180,
)

# Doubled so that a cell index plus a hash (at most 511) never needs wrapping.
_P = PERMUTATION * 2

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def lerp(t, a, b):
    "Linear interpolation."
    return a + t * (b - a)

def grad(hash_value, x, y, z):
    """
    Dot product of (x, y, z) with one of the 12 cube-edge directions.

    The low 4 bits of the hash pick the direction: the top bits choose which
    two offset components take part and bits 0 and 1 choose their signs.
    Hashes 12..15 repeat four of the twelve directions.
    """
    h = hash_value & C.GRADIENT_HASH_MASK
    u = x if h < 8 else y
    v = y if h < 4 else (x if h in (12, 14) else z)
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)

def unit_cube(coord):
    """
    Find the lattice cell containing a coordinate and the offset into it.

    Returns (cell, offset): the floored coordinate wrapped into 0..255 and
    the distance from the cell's lower face, in [0, 1).
    """
    clamped = min(max(coord, C.INT32_MIN), C.INT32_MAX)
    cell = math.floor(clamped) & C.PERMUTATION_MASK
    offset = coord - math.floor(coord)
    return cell, offset

def noise(x, y, z):
    """
    Improved Perlin noise at (x, y, z).

    Returns a value in roughly [-1.0, 1.0]. The result is zero at every
    lattice point and depends only on the arguments.
    """
    # Find the unit cube that contains the point, and where in it the point is.
    X, x = unit_cube(x)
    Y, y = unit_cube(y)
    Z, z = unit_cube(z)

    u = fade(x)
    v = fade(y)
    w = fade(z)

    p = _P
    # Hash the coordinates of the 8 cube corners.
    A = p[X] + Y
    AA = p[A] + Z
    AB = p[A + 1] + Z
    B = p[X + 1] + Y
    BA = p[B] + Z
    BB = p[B + 1] + Z

    # Blend the corner contributions along x, then y, then z.
    return lerp(w, lerp(v, lerp(u, grad(p[AA], x, y, z),
                                   grad(p[BA], x - 1, y, z)),
                           lerp(u, grad(p[AB], x, y - 1, z),
                                   grad(p[BB], x - 1, y - 1, z))),
                   lerp(v, lerp(u, grad(p[AA + 1], x, y, z - 1),
                                   grad(p[BA + 1], x - 1, y, z - 1)),
                           lerp(u, grad(p[AB + 1], x, y - 1, z - 1),
                                   grad(p[BB + 1], x - 1, y - 1, z - 1))))
