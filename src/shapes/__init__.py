"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン shape を import 副作用で登録し、`api.generate`/`G` から解決できるようにする。
なぜ: 生成関数の拡張点を一箇所に集約するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import arc as _register_arc  # noqa: F401
from . import capsule as _register_capsule  # noqa: F401
from . import checkerboard as _register_checkerboard  # noqa: F401
from . import circle as _register_circle  # noqa: F401
from . import flower as _register_flower  # noqa: F401
from . import spirograph as _register_spirograph  # noqa: F401
from . import trapezoid as _register_trapezoid  # noqa: F401
from . import triangle as _register_triangle  # noqa: F401
from .animatable import AnimatablePair, interpolate, lerp
from .arc import Arc, generate_arc
from .base import AnimatableShape, InsettableShape, Shape
from .capsule import Capsule, generate_capsule
from .checkerboard import Checkerboard, generate_checkerboard
from .circle import Circle, Rings, generate_circle, generate_rings
from .flower import Flower, generate_flower
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export
from .spirograph import Spirograph, generate_spirograph
from .trapezoid import Trapezoid, generate_trapezoid
from .triangle import Triangle, generate_triangle

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "Shape",
    "InsettableShape",
    "AnimatableShape",
    "AnimatablePair",
    "lerp",
    "interpolate",
    "Arc",
    "Capsule",
    "Checkerboard",
    "Circle",
    "Flower",
    "Rings",
    "Spirograph",
    "Trapezoid",
    "Triangle",
    "generate_arc",
    "generate_capsule",
    "generate_checkerboard",
    "generate_circle",
    "generate_flower",
    "generate_rings",
    "generate_spirograph",
    "generate_trapezoid",
    "generate_triangle",
]
