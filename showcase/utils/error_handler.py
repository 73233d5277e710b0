"""Exceptions raised by the service and the form client"""


class ApiException(Exception):
    """
    Base exception, rendered as {"error": message} with its status code
    """

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class WrongSchema(ApiException):
    status_code = 400


class EmptyQuery(ApiException):
    status_code = 404


class DataAlreadyPresent(ApiException):
    status_code = 409


class DatabaseError(ApiException):
    status_code = 500

    def __init__(self, operation, err, message):
        super().__init__(message)
        self.operation = operation
        self.original = err


class SubmissionError(Exception):
    """A project submission that did not reach a success response."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
