from typing import Any, Mapping

from utils.errors import BadRequestError


def quote_identifier(name: str) -> str:
    """컬럼명을 쌍따옴표로 감싼다 (예약어/대소문자 보존)"""
    return '"' + name.replace('"', '""') + '"'


def build_set_clause(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str] | None = None
) -> tuple[str, list[Any]]:
    """
    부분 수정용 UPDATE SET 절 생성.

    Args:
        update_fields: 수정할 필드와 값 {"firstName": "Aliya", "age": 32}
        column_map: 필드 -> DB 컬럼 매핑 {"firstName": "first_name"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        (set_clause, values) 튜플
        - set_clause: '"first_name"=$1, "age"=$2'
        - values: ["Aliya", 32]  ($N 위치와 동일한 순서)

    Raises:
        BadRequestError: update_fields가 비어있는 경우

    WHERE 절에 추가로 바인딩하는 값은 ${len(values) + 1}부터 이어서 사용한다.

    Example:
        >>> clause, values = build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        >>> clause
        '"first_name"=$1, "age"=$2'
        >>> values
        ['Aliya', 32]
    """
    if not update_fields:
        raise BadRequestError("No data")

    column_map = column_map or {}
    set_parts = []
    values = []

    for idx, (field_name, value) in enumerate(update_fields.items(), start=1):
        column_name = column_map.get(field_name, field_name)
        set_parts.append(f"{quote_identifier(column_name)}=${idx}")
        values.append(value)

    return ", ".join(set_parts), values


def escape_like(text: str) -> str:
    """LIKE/ILIKE 패턴 특수문자 이스케이프"""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
