class ServiceError(Exception):
    """서비스 계층 예외의 기본 클래스"""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class NotFoundError(ServiceError):
    """식별자에 해당하는 레코드가 없을 때 발생"""

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__("NOT_FOUND_001", f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class InvalidInputError(ServiceError):
    """부분 업데이트 페이로드가 잘못되었을 때 발생"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__("INPUT_INVALID_001", f"{field}: {message}")
        self.field = field
