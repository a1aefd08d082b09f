# MISE-DASHBOARD/app/core/exceptions.py


class UpstreamAPIError(Exception):
    """공공데이터 API가 실패 응답(resultCode != '00')을 주었거나 호출 자체가 실패한 경우"""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
