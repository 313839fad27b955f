"""Use cases do endpoint de Flow."""

from app.use_cases.flow.process_flow_event import FlowEventResult, ProcessFlowEventUseCase

__all__ = [
    "FlowEventResult",
    "ProcessFlowEventUseCase",
]
