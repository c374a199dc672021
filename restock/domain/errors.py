"""재고 보충 도메인 예외"""


class RestockError(Exception):
    """재고 보충 계산 예외 기본 클래스"""


class UnresolvedCycleError(RestockError):
    """탐색 기간 내에 다음 발주/도착 주기를 찾지 못함

    날짜를 임의로 만들어내지 않고 호출자에게 그대로 전달한다.
    """

    def __init__(self, message: str, today=None, horizon_months: int = 0):
        super().__init__(message)
        self.today = today
        self.horizon_months = horizon_months
