"""
平坦化済み 2D ポリライン集合 `Geometry`

`Path` を直線だけで描くバックエンド（プロッタ、ラスタライザ、テストでの数値検証）向けの表現。
`engine.core.flatten.flatten` が `Path` からこの型を生成する。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY）。
- `offsets: int32 ndarray (M+1,)`: 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線分配列は `coords[offsets[i] : offsets[i+1]]` で取り出せる。

直感図（複数線の格納）:

    # 2 本のポリライン（線0は3点、線1は2点）
    # coords (N=5): [[0,0], [1,0], [1,1], [2,2], [3,2]]
    # offsets (M+1=3): [0, 3, 5]
    #   線0 = coords[0:3]
    #   線1 = coords[3:5]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`（線本数 M=0）。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float64)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1 or offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む 1 次元配列である必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")

    return coords_arr, offsets_arr


class Geometry:
    """平坦化済みポリライン集合（不変として扱う）。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _normalize_geometry_input(coords, offsets)

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """`(K, 2)` 座標列の集合から `Geometry` を生成する。

        Raises
        ------
        ValueError
            いずれかの線が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float64)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            return cls(np.empty((0, 2), dtype=np.float64), np.array([0], dtype=np.int32))

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([arr.shape[0] for arr in np_lines])
        return cls(np.concatenate(np_lines, axis=0), offsets)

    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)` を返す。`copy=False` は読み取り専用ビュー。"""
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    def lines(self) -> list[np.ndarray]:
        """各ポリラインの座標ビューのリスト。"""
        return [
            self.coords[self.offsets[i] : self.offsets[i + 1]] for i in range(len(self))
        ]

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数、常に新しいインスタンス）。"""
        return Geometry(self.coords + np.array([dx, dy], dtype=np.float64), self.offsets.copy())

    def concat(self, other: "Geometry") -> "Geometry":
        """連結。`other.offsets[1:]` に先行頂点数を加算して結合する。"""
        if self.is_empty:
            return Geometry(other.coords.copy(), other.offsets.copy())
        if other.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        shift = self.coords.shape[0]
        new_coords = np.vstack([self.coords, other.coords])
        new_offsets = np.hstack([self.offsets, other.offsets[1:] + shift])
        return Geometry(new_coords, new_offsets)

    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={len(self)})"


__all__ = ["Geometry", "LineLike"]
