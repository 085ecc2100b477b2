"""
どこで: `common` の型定義。
何を: Vec2/Bounds などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Vec2 = tuple[float, float]
Bounds = tuple[float, float, float, float]  # (min_x, min_y, max_x, max_y)

__all__ = ["Vec2", "Bounds"]
