import json
import logging

EVENT_DEFAULTS = {"event": "system", "entity": "-", "entity_id": "-"}

CONSOLE_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s "
    "event=%(event)s entity=%(entity)s entity_id=%(entity_id)s %(message)s"
)


class EventFormatter(logging.Formatter):
    """이벤트 필드(event, entity, entity_id)가 없는 레코드에 기본값을 채움"""

    def format(self, record: logging.LogRecord) -> str:
        for name, default in EVENT_DEFAULTS.items():
            if not hasattr(record, name):
                setattr(record, name, default)
        return super().format(record)


class JsonEventFormatter(EventFormatter):
    """레코드를 한 줄 JSON으로 출력"""

    def format(self, record: logging.LogRecord) -> str:
        super().format(record)
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            **{name: getattr(record, name) for name in EVENT_DEFAULTS},
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_handler(log_format: str) -> logging.Handler:
    """출력 형식에 맞는 스트림 핸들러를 생성

    Args:
        log_format: "console" 또는 "json"

    Returns:
        포매터가 지정된 핸들러
    """
    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JsonEventFormatter())
    else:
        handler.setFormatter(EventFormatter(CONSOLE_FORMAT))
    return handler


def configure_logging(level: str, log_format: str = "console") -> None:
    """애플리케이션 로깅을 설정

    Args:
        level: 로깅 레벨 문자열
        log_format: 출력 형식(console, json)
    """
    logging.basicConfig(level=level.upper(), handlers=[build_handler(log_format)])
