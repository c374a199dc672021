"""
검증 결과 데이터 클래스

ValidationResult, ValidationError, InvalidInputError 를 정의합니다.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationError:
    """입력 필드 오류 1건"""
    error_code: str                              # 'NOT_A_NUMBER', 'NEGATIVE_VALUE', etc.
    error_message: str                           # 사람이 읽을 수 있는 오류 메시지
    field_name: str                              # 문제가 된 입력 필드
    metadata: Optional[Dict[str, Any]] = None    # 추가 정보 (actual 등)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리 변환"""
        return {
            'code': self.error_code,
            'message': self.error_message,
            'field': self.field_name,
            'metadata': self.metadata,
        }


@dataclass
class ValidationResult:
    """폼 입력 검증 결과"""
    is_valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def add_error(
        self,
        error_code: str,
        error_message: str,
        field_name: str,
        metadata: Optional[Dict[str, Any]] = None
    ):
        """오류 추가

        Args:
            error_code: 오류 코드
            error_message: 오류 메시지
            field_name: 입력 필드명
            metadata: 추가 정보
        """
        self.errors.append(ValidationError(
            error_code=error_code,
            error_message=error_message,
            field_name=field_name,
            metadata=metadata,
        ))
        self.is_valid = False

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리 변환 (JSON 직렬화용)"""
        return {
            'is_valid': self.is_valid,
            'errors': [e.to_dict() for e in self.errors],
        }

    def __str__(self) -> str:
        status = "PASSED" if self.is_valid else "FAILED"
        fields = ", ".join(e.field_name for e in self.errors)
        return f"ValidationResult({status}): {len(self.errors)} errors [{fields}]"


class InvalidInputError(ValueError):
    """숫자가 아니거나 음수인 재고/사용량/안전일수 입력

    코어에 도달하기 전에 호출자(웹/CLI)에서 걸러낸다.
    """

    def __init__(self, result: ValidationResult):
        super().__init__(
            "입력값이 올바르지 않습니다: "
            + "; ".join(e.error_message for e in result.errors)
        )
        self.result = result
