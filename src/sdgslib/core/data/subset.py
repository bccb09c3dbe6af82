"""
Immutable research subset of record indices.
"""
# 说明：研究子集（research subset）的不可变表示。
# 职责：
# - DataSubset：保存所属数据集的记录数 size 与被抽中的记录下标集合 indices（均位于 [0, size)）
# - 支持成员判断、长度、按升序迭代，以及导出为 numpy 下标数组 / 布尔掩码
# - to_dict / from_dict：持久化往返；重新抽样时整体替换对象，绝不原地修改

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping

import numpy as np

from sdgslib.core.utils.param_validation import ParamValidationError, ensure, ensure_type


@dataclass(frozen=True)
class DataSubset:
    """Set of record indices drawn from ``[0, size)`` plus ``size`` itself."""

    size: int
    indices: frozenset

    def __post_init__(self) -> None:
        ensure_type(self.size, (numbers.Integral,), label="size")
        ensure(self.size >= 0, "size must be non-negative")
        object.__setattr__(self, "size", int(self.size))
        object.__setattr__(self, "indices", frozenset(int(i) for i in self.indices))
        for index in self.indices:
            if index < 0 or index >= self.size:
                raise ParamValidationError(f"subset index {index} outside [0, {self.size})")

    @classmethod
    def create(cls, size: int, indices: Iterable[int]) -> "DataSubset":
        """Build a subset of a dataset with ``size`` records."""
        if isinstance(indices, np.ndarray):
            indices = indices.tolist()
        return cls(size=size, indices=frozenset(indices))

    @classmethod
    def from_mask(cls, mask: Any) -> "DataSubset":
        """Build a subset from a boolean mask with one entry per record."""
        arr = np.asarray(mask, dtype=bool)
        if arr.ndim != 1:
            raise ParamValidationError("mask must be one-dimensional")
        return cls.create(int(arr.size), np.flatnonzero(arr))

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.indices))

    @property
    def fraction(self) -> float:
        # 子集占整个数据集的比例；空数据集时为 0
        return len(self.indices) / self.size if self.size else 0.0

    def to_array(self) -> np.ndarray:
        return np.fromiter(sorted(self.indices), dtype=np.int64, count=len(self.indices))

    def to_mask(self) -> np.ndarray:
        mask = np.zeros(self.size, dtype=bool)
        if self.indices:
            mask[self.to_array()] = True
        return mask

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self.size, "indices": sorted(self.indices)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataSubset":
        if "size" not in data or "indices" not in data:
            raise ParamValidationError("serialized subset requires 'size' and 'indices'")
        return cls.create(data["size"], data["indices"])

    def __repr__(self) -> str:
        return f"DataSubset(size={self.size}, selected={len(self.indices)})"
