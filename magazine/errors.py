# magazine/errors.py
from typing import Optional


class MagazineError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"message": self.message}


class ArticleNotFound(MagazineError):
    status_code = 404
    message = "Article not found"


class ValidationFailed(MagazineError):
    status_code = 400
    message = "Invalid payload"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self):
        out = {"message": self.message}
        if self.field is not None:
            out["field"] = self.field
        return out
