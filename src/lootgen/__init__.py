class LootgenException(Exception):
    status_code: int = 400

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail: str = detail
