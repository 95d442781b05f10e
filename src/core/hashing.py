"""
템플릿 fingerprint: HTTP ETag로 쓰는 내용 해시.

규칙:
- 키 정렬 후 직렬화
- source 경로 제외 (같은 내용 → 위치와 무관하게 같은 해시)
- SHA-256
"""

import hashlib
import json
from typing import Any

from src.domain.schemas import IssueTemplate


def canonical_json(data: dict[str, Any]) -> str:
    """
    결정적 JSON 직렬화.

    Args:
        data: 직렬화할 데이터

    Returns:
        JSON 문자열 (키 정렬, 공백 없음)
    """
    return json.dumps(
        data,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
    )


def compute_template_hash(template: IssueTemplate) -> str:
    """
    템플릿 내용의 SHA-256.

    Args:
        template: IssueTemplate

    Returns:
        64자 hex digest
    """
    data = template.to_dict()
    data.pop("source", None)
    return hashlib.sha256(canonical_json(data).encode("utf-8")).hexdigest()
