"""Status + body pair returned by handlers."""

from dataclasses import dataclass

from fastapi.responses import JSONResponse

from category_api.dto import CategoryResponse
from category_api.entities import Category


@dataclass
class HandlerResult:
    """Outcome of one handler call.

    The body keeps the domain object (not its JSON) so callers can check
    exactly which category came back.

    Attributes:
        status_code: HTTP status code
        body: A category or a plain message
    """

    status_code: int
    body: Category | str

    def to_response(self) -> JSONResponse:
        """Render as a JSON response."""
        if isinstance(self.body, Category):
            content = CategoryResponse.from_entity(self.body).model_dump()
        else:
            content = self.body
        return JSONResponse(status_code=self.status_code, content=content)
