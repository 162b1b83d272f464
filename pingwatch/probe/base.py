"""
Abstract base class for probe implementations
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from ..models import ProbeResult


class BaseProbe(ABC):
    """Abstract base class for reachability probes"""
    
    def __init__(self, timeout_ms: int = 4000,
                 cancel_event: Optional[threading.Event] = None):
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self.timeout_ms = timeout_ms
        self.cancel_event = cancel_event
    
    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()
    
    @abstractmethod
    def probe(self, host: str) -> ProbeResult:
        """
        Send a single echo request to host and wait for the reply.
        
        Args:
            host: IP address or hostname
            
        Returns:
            ProbeResult with latency_ms set on reply, None on any failure
        """
        pass
    
    def close(self):
        """Clean up resources"""
        pass
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
