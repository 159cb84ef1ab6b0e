from enum import Enum


class ReportStatus(str, Enum):
    pending = "pending"
    reviewed = "reviewed"
    resolved = "resolved"


# forward-only review workflow
NEXT_STATUS = {
    ReportStatus.pending: ReportStatus.reviewed,
    ReportStatus.reviewed: ReportStatus.resolved,
}


def can_transition(current: ReportStatus, target: ReportStatus) -> bool:
    return NEXT_STATUS.get(current) == target
