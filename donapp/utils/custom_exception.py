class CustomMessageException(Exception):
    def __init__(self, messages: str | list[str], status_code: int = 400) -> None:
        super().__init__(messages)
        self.messages = messages if isinstance(messages, list) else [messages]
        self.status_code = status_code
