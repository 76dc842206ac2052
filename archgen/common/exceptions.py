from fastapi import HTTPException, status


class ArchGenException(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class InvalidRequirement(ArchGenException):
    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class UnsupportedOptimizationObjective(ArchGenException):
    def __init__(self, objective: str):
        self.objective = objective
        super().__init__(
            detail=f"Unsupported optimization objective '{objective}'",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class DegenerateGeometry(ArchGenException):
    def __init__(self, element_id: str | None = None, detail: str | None = None):
        self.element_id = element_id
        msg = "Degenerate structural geometry"
        if element_id:
            msg = f"Degenerate structural geometry for element '{element_id}'"
        if detail:
            msg += f" - {detail}"
        super().__init__(detail=msg, status_code=status.HTTP_400_BAD_REQUEST)
