"""
Random source helpers.

Responsibilities
  - Provide the default, non-seedable randomness source used for drawing
    research subsets (OS entropy, cryptographically strong).
  - Centralize creation of seeded numpy generators for tests and tooling.
  - Define the minimal interface a randomness source must offer.

Usage Context
  - Production code relies on ``SecureRandomSource``; subsets drawn with it
    are intentionally not reproducible across runs.
  - Tests inject ``create_rng(seed)`` to replay draws deterministically.

Limitations
  - ``SecureRandomSource`` is slower than numpy's PCG64 for very large sizes.
"""
# 说明：随机源辅助工具，统一管理研究子集抽样所用的随机数来源。
# 职责：
# - RandomSource：约定随机源最小接口（random(size) -> [0,1) 浮点数组），与 numpy Generator 兼容
# - SecureRandomSource：基于操作系统熵（secrets.SystemRandom）的默认随机源，不可播种、不可复现
# - create_rng：创建可播种的 numpy Generator，供测试注入以获得可复现抽样
# - resolve_random_source：None 时回落到安全随机源，否则原样返回注入的随机源

from __future__ import annotations

import secrets
from typing import Any, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Anything exposing numpy's ``Generator.random(size)`` signature."""

    def random(self, size: Any = None) -> Any:  # pragma: no cover - protocol
        ...


class SecureRandomSource:
    """
    Cryptographically strong uniform source backed by OS entropy.

    - Behavior
      - Draws 53-bit uniform doubles in [0, 1) from ``secrets.SystemRandom``.
      - Cannot be seeded; two instances never share a stream.

    - Usage Notes
      - Default source for subset sampling.
    """
    # 安全随机源：按 numpy 接口返回 [0,1) 浮点数组，内部使用系统级密码学随机数

    def __init__(self) -> None:
        self._system = secrets.SystemRandom()

    def random(self, size: Any = None) -> Any:
        if size is None:
            return self._system.random()
        shape = (int(size),) if np.isscalar(size) else tuple(int(s) for s in size)
        count = int(np.prod(shape)) if shape else 1
        draws = np.fromiter((self._system.random() for _ in range(count)), dtype=np.float64, count=count)
        return draws.reshape(shape)

    def __repr__(self) -> str:
        return "SecureRandomSource()"


def create_rng(seed: Optional[Any] = None) -> np.random.Generator:
    """Create a numpy Generator from a seed, SeedSequence, or existing generator."""
    # 将输入规范化为 numpy.random.Generator；若已是 Generator 则直接返回
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def resolve_random_source(rng: Optional[RandomSource] = None) -> RandomSource:
    """Return ``rng`` unchanged, or a fresh ``SecureRandomSource`` when omitted."""
    if rng is None:
        return SecureRandomSource()
    if not isinstance(rng, RandomSource):
        raise TypeError("rng must expose a random(size) method")
    return rng
