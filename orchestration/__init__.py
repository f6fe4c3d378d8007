"""
Orchestration Module

This package runs the MAC changing loop: the scheduler that cycles every
configured interface, and the service entry point that hosts it.
"""

from orchestration.scheduler import MacChangeScheduler, trigger_period_minutes

__all__ = ['MacChangeScheduler', 'trigger_period_minutes']
