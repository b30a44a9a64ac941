from typing import Union


class TelerivetError(Exception):
    pass


class TelerivetApiError(TelerivetError):

    def __init__(self, message: str, code: Union[None, str] = None, param: Union[None, str] = None,
                 status_code: Union[None, int] = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: Union[None, str] = code
        self.param: Union[None, str] = param
        self.status_code: Union[None, int] = status_code

    def __str__(self) -> str:
        if self.code:
            return f'{self.code}: {self.message}'
        return self.message


class InvalidParameterError(TelerivetApiError):
    pass


class NotFoundError(TelerivetApiError):
    pass


ERROR_CODES = {
    'invalid_param': InvalidParameterError,
    'not_found': NotFoundError,
}
