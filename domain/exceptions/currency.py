class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class ProviderError(CurrencyException):
    pass

class MissingRateError(CurrencyException):
    pass

class CalculationError(CurrencyException):
    pass
