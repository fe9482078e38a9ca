import unittest

from gdrivemodels.errors.exceptions import (
    ApiError,
    AuthError,
    GDriveModelsError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidRecordError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveModelsError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        self.assertEqual(GDriveModelsError("msg").details, {})

    def test_invalid_record_is_invalid_argument(self) -> None:
        self.assertTrue(issubclass(InvalidRecordError, InvalidArgumentError))

    def test_map_http_error_basic(self) -> None:
        cases = {
            400: InvalidArgumentError,
            401: AuthError,
            404: NotFoundError,
            429: RateLimitError,
        }
        for status, expected in cases.items():
            err = map_http_error(HttpErrorInfo(status_code=status, message="m"))
            self.assertIsInstance(err, expected, status)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="dailyLimitExceededUnreg")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(HttpErrorInfo(status_code=403, reason="forbidden"))
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_details_and_default_message(self) -> None:
        cause = ValueError("x")
        err = map_http_error(
            HttpErrorInfo(status_code=503, reason="backendError", details={"domain": "global"}),
            cause=cause,
        )
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "HTTP error 503")
        self.assertEqual(err.details["status_code"], 503)
        self.assertEqual(err.details["reason"], "backendError")
        self.assertEqual(err.details["domain"], "global")
        self.assertIs(err.cause, cause)

    def test_map_http_error_403_rate_limit_reasons(self) -> None:
        for reason in ("rateLimitExceeded", "userRateLimitExceeded"):
            err = map_http_error(HttpErrorInfo(status_code=403, reason=reason))
            self.assertIsInstance(err, RateLimitError, reason)
            self.assertNotIsInstance(err, PermissionError)
            self.assertEqual(err.details["status_code"], 403)

    def test_map_http_error_other_is_api_error(self) -> None:
        for status in (409, 412, 418):
            err = map_http_error(HttpErrorInfo(status_code=status, message="m"))
            self.assertIsInstance(err, ApiError, status)


if __name__ == "__main__":
    unittest.main()
