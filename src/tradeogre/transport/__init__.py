from .structs import HTTPMethod, RestConfig
from .rest_transport import Transport, RestTransport

__all__ = ['HTTPMethod', 'RestConfig', 'Transport', 'RestTransport']
