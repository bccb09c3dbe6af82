"""
Property-based tests for generalization level resolution.
"""
# 说明：泛化级别解析的属性测试。
# 覆盖：
# - 任意方案与层次边界组合下，解析结果总落在 [min_level, max_level]
# - 无层次属性恒解析为最小边界
# - 显式级别优先于任何程度设置

from hypothesis import given, strategies as st

from sdgslib.core.data import AttributeHierarchyBounds, GeneralizationDegree, GeneralizationScheme, resolve_level

degrees = st.sampled_from(list(GeneralizationDegree))


@st.composite
def hierarchy_bounds(draw):
    low = draw(st.integers(min_value=0, max_value=20))
    high = draw(st.integers(min_value=low, max_value=40))
    return AttributeHierarchyBounds(True, low, high)


@st.composite
def schemes(draw):
    scheme = GeneralizationScheme(["age"], draw(st.one_of(st.none(), degrees)))
    choice = draw(st.sampled_from(["none", "degree", "level"]))
    if choice == "degree":
        scheme.generalize("age", draw(degrees))
    elif choice == "level":
        scheme.generalize("age", draw(st.integers(min_value=0, max_value=60)))
    return scheme


@given(schemes(), hierarchy_bounds())
def test_resolved_level_within_bounds(scheme, bounds):
    level = resolve_level("age", bounds, scheme)
    assert bounds.min_level <= level <= bounds.max_level


@given(schemes())
def test_attribute_without_hierarchy_resolves_to_zero(scheme):
    assert resolve_level("age", AttributeHierarchyBounds(False), scheme) == 0


@given(hierarchy_bounds(), degrees, degrees, st.integers(min_value=0, max_value=60))
def test_explicit_level_wins(bounds, global_degree, attribute_degree, level):
    scheme = GeneralizationScheme(["age"], global_degree).generalize("age", attribute_degree)
    scheme.generalize("age", level)
    assert resolve_level("age", bounds, scheme) == bounds.clamp(level)
