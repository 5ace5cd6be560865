from rotorwash.services.base.service_result import ServiceResult

__all__ = ["ServiceResult"]
