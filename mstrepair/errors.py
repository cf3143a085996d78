class MstRepairError(Exception):
    pass


class GraphReadError(MstRepairError):
    """Raised when a graph file is missing, unreadable or malformed."""
