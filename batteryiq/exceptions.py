class BatteryIQError(Exception): ...


class TariffError(BatteryIQError): ...


class CoverageError(TariffError): ...


def require(condition: bool, message: str, exc: type[BatteryIQError] = BatteryIQError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
