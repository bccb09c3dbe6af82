"""
Generalization schemes and per-attribute level resolution.

A scheme collects three independently specifiable sources of generalization
for the quasi-identifiers of a dataset:

- explicit per-attribute levels,
- per-attribute degrees (fractions of the attribute's hierarchy height),
- one global default degree.

``get_generalization_level`` resolves them with a fixed precedence and clamps
the result into the bounds the attribute's hierarchy allows.
"""
# 说明：数据泛化方案及按属性解析泛化级别的逻辑。
# 职责：
# - GeneralizationDegree：七个固定的泛化程度（NONE..COMPLETE），以层次高度的比例表示
# - GeneralizationScheme：记录按属性的显式级别、按属性的泛化程度与全局默认程度；写入时校验属性与级别
# - resolve_level：优先级 显式级别 > 属性程度 > 全局程度 > 0；无层次结构时为 0；最终裁剪到 [min, max]
# 约定：
# - 程度换算级别采用四舍五入（floor(x + 0.5)），不使用 Python 默认的银行家舍入
# - 方案的写操作仅应在配置阶段进行，本类不提供内部加锁

from __future__ import annotations

import enum
import math
import numbers
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from sdgslib.core.utils.param_validation import ParamValidationError
from .handles import AttributeHierarchyBounds, DataDefinition, bounds_from_definition


class GeneralizationError(ParamValidationError):
    """Base exception for invalid generalization scheme writes."""


class UnknownAttributeError(GeneralizationError):
    """Raised when a write references an attribute the scheme does not know."""


class InvalidLevelError(GeneralizationError):
    """Raised when an explicit generalization level is negative."""


class GeneralizationDegree(enum.Enum):
    """A specific generalization degree, as a fraction of the hierarchy height."""

    NONE = 0.0
    LOW = 0.2
    LOW_MEDIUM = 0.4
    MEDIUM = 0.5
    MEDIUM_HIGH = 0.6
    HIGH = 0.8
    COMPLETE = 1.0

    @property
    def factor(self) -> float:
        return float(self.value)

    def level_for(self, max_level: int) -> int:
        """Level this degree selects on a hierarchy of height ``max_level``."""
        return int(math.floor(self.factor * float(max_level) + 0.5))

    @classmethod
    def from_str(cls, name: str) -> "GeneralizationDegree":
        try:
            return cls[name.upper().replace(" ", "_").replace("-", "_")]
        except KeyError as exc:
            raise ParamValidationError(f"unknown generalization degree '{name}'") from exc


def _attribute_names(data: Any) -> Iterable[str]:
    # 支持三种输入：带 attributes 属性的对象、带 columns 的表格对象、或属性名可迭代对象
    if hasattr(data, "attributes"):
        return data.attributes
    if hasattr(data, "columns"):
        return [str(c) for c in data.columns]
    if isinstance(data, str):
        return [data]
    return data


class GeneralizationScheme:
    """Encapsulates a generalization scheme over a fixed set of attributes."""

    def __init__(self, attributes: Iterable[str], degree: Optional[GeneralizationDegree] = None) -> None:
        self._attributes: FrozenSet[str] = frozenset(attributes)
        self._degrees: Dict[str, GeneralizationDegree] = {}
        self._levels: Dict[str, int] = {}
        self._degree: Optional[GeneralizationDegree] = None
        if degree is not None:
            self.generalize(degree)

    @classmethod
    def create(cls, data: Any, degree: Optional[GeneralizationDegree] = None) -> "GeneralizationScheme":
        """Create a scheme over the attributes of ``data`` with an optional global degree."""
        return cls(_attribute_names(data), degree)

    # Read accessors ------------------------------------------------------------
    @property
    def attributes(self) -> FrozenSet[str]:
        return self._attributes

    @property
    def degree(self) -> Optional[GeneralizationDegree]:
        return self._degree

    @property
    def degrees(self) -> Mapping[str, GeneralizationDegree]:
        return MappingProxyType(self._degrees)

    @property
    def levels(self) -> Mapping[str, int]:
        return MappingProxyType(self._levels)

    # Writes ----------------------------------------------------------------------
    def generalize(
        self,
        attribute: Union[str, GeneralizationDegree],
        value: Union[GeneralizationDegree, int, None] = None,
    ) -> "GeneralizationScheme":
        """
        Define a generalization and return the scheme for chaining.

        - ``generalize(degree)`` sets the global default degree.
        - ``generalize(attribute, degree)`` sets a per-attribute degree.
        - ``generalize(attribute, level)`` sets an explicit per-attribute level.
        """
        if isinstance(attribute, GeneralizationDegree):
            if value is not None:
                raise ParamValidationError("a global degree takes no second argument")
            self._degree = attribute
            return self
        if isinstance(value, GeneralizationDegree):
            return self.set_degree(attribute, value)
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return self.set_level(attribute, int(value))
        raise ParamValidationError(
            f"expected a GeneralizationDegree or an integer level for '{attribute}', got {value!r}"
        )

    def set_degree(self, attribute: str, degree: GeneralizationDegree) -> "GeneralizationScheme":
        self._check(attribute)
        if not isinstance(degree, GeneralizationDegree):
            raise ParamValidationError(f"invalid generalization degree: {degree!r}")
        self._degrees[attribute] = degree
        return self

    def set_level(self, attribute: str, level: int) -> "GeneralizationScheme":
        self._check(attribute)
        if level < 0:
            raise InvalidLevelError(f"Invalid generalization level: {level}")
        self._levels[attribute] = level
        return self

    def _check(self, attribute: str) -> None:
        if attribute not in self._attributes:
            raise UnknownAttributeError(f"Unknown attribute: {attribute}")

    # Resolution -----------------------------------------------------------------
    def get_generalization_level(self, attribute: str, definition: DataDefinition) -> int:
        """Return the level this scheme selects for ``attribute`` under ``definition``."""
        return resolve_level(attribute, bounds_from_definition(attribute, definition), self)

    # Persistence ----------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": sorted(self._attributes),
            "degree": self._degree.name if self._degree is not None else None,
            "degrees": {attr: deg.name for attr, deg in sorted(self._degrees.items())},
            "levels": dict(sorted(self._levels.items())),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneralizationScheme":
        degree = data.get("degree")
        scheme = cls(data["attributes"], GeneralizationDegree[degree] if degree else None)
        for attribute, name in data.get("degrees", {}).items():
            scheme.set_degree(attribute, GeneralizationDegree[name])
        for attribute, level in data.get("levels", {}).items():
            scheme.set_level(attribute, int(level))
        return scheme

    def __repr__(self) -> str:
        degree = self._degree.name if self._degree is not None else None
        return (
            f"GeneralizationScheme(attributes={sorted(self._attributes)}, degree={degree}, "
            f"degrees={len(self._degrees)}, levels={len(self._levels)})"
        )


def resolve_level(attribute: str, bounds: AttributeHierarchyBounds, scheme: GeneralizationScheme) -> int:
    """Resolve the generalization level of one attribute."""
    result = 0
    if bounds.has_hierarchy:
        if attribute in scheme.levels:
            result = scheme.levels[attribute]
        elif attribute in scheme.degrees:
            result = scheme.degrees[attribute].level_for(bounds.max_level)
        elif scheme.degree is not None:
            result = scheme.degree.level_for(bounds.max_level)
    return bounds.clamp(result)
