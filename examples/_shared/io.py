"""
Report output helpers for the example scripts.
"""
import json
from pathlib import Path
from typing import Any, Dict, Union

from sdgslib.core.utils import serialize_to_json


def write_report(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write ``data`` as JSON, creating the parent directory when needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    # 先经库内序列化处理 numpy / 枚举等类型，再格式化输出
    target.write_text(json.dumps(json.loads(serialize_to_json(data)), indent=2), encoding="utf-8")
    return target


def print_summary(result: Dict[str, Any]) -> None:
    """Print the name, config and metrics sections of an example result."""
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'unknown')}")
    for section in ("config", "metrics", "artifacts"):
        values = result.get(section)
        if not values:
            continue
        print("-" * 60)
        print(f"{section.capitalize()}:")
        for key, value in values.items():
            print(f"  {key}: {value}")
    print("=" * 60)
