"""S3 API controller (internal use only)."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterator, Optional, TypeVar, Union

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    NoCredentialsError,
    PartialCredentialsError,
)

from sitesync.errors import (
    ApiError,
    AuthError,
    HttpErrorInfo,
    InvalidArgumentError,
    ListingError,
    NetworkError,
    ScanError,
    SiteSyncError,
    map_http_error,
)
from sitesync.models import RemoteObject

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENDPOINT_ENV_VAR: str = "AWS_S3_ENDPOINT"


class S3Controller:
    """
    S3 API controller (internal only).

    Notes:
        - The boto3 client is NOT exposed.
        - A custom endpoint (argument or AWS_S3_ENDPOINT) switches to
          path-style addressing, as S3-compatible servers expect.
        - Credentials come from boto3's default chain.
    """

    def __init__(
        self,
        region: str,
        *,
        endpoint: Optional[str] = None,
    ) -> None:
        if not isinstance(region, str) or not region.strip():
            raise InvalidArgumentError("region must be a non-empty string")

        self._region = region
        self._endpoint = endpoint or os.environ.get(ENDPOINT_ENV_VAR) or None

        kwargs: dict[str, Any] = {"region_name": region}
        if self._endpoint:
            kwargs["endpoint_url"] = self._endpoint
            kwargs["config"] = BotoConfig(s3={"addressing_style": "path"})
        self._client = boto3.client("s3", **kwargs)

    @classmethod
    def from_client(
        cls,
        client: Any,
        *,
        region: Optional[str] = None,
        endpoint: Optional[str] = None,
    ) -> "S3Controller":
        """Create controller from a pre-built S3 client (useful for tests)."""
        obj = cls.__new__(cls)
        obj._region = region
        obj._endpoint = endpoint
        obj._client = client
        return obj

    @property
    def region(self) -> Optional[str]:
        return self._region

    @property
    def endpoint(self) -> Optional[str]:
        return self._endpoint

    # ----------------------------
    # Public API
    # ----------------------------
    def iter_objects(
        self,
        bucket: str,
        prefix: Optional[str] = None,
    ) -> Iterator[RemoteObject]:
        """
        Lazily list every object under prefix, page by page.

        Raises:
            ListingError: if an entry has no Key or no ETag.
            SiteSyncError subclasses: mapped client/network errors.
        """
        kwargs: dict[str, Any] = {"Bucket": bucket}
        if prefix:
            kwargs["Prefix"] = prefix

        paginator = self._execute(lambda: self._client.get_paginator("list_objects_v2"))
        pages = iter(paginator.paginate(**kwargs))
        page_number = 0

        while True:
            # Every page fetch is a request.
            page = self._execute(lambda: next(pages, None))
            if page is None:
                break

            page_number += 1
            contents = page.get("Contents") or []
            logger.debug(
                "Listed page %d of s3://%s/%s (%d objects)",
                page_number,
                bucket,
                prefix or "",
                len(contents),
            )

            for entry in contents:
                yield _entry_to_remote_object(entry)

    def put_object(
        self,
        bucket: str,
        key: str,
        body: Union[str, bytes, Any],
        *,
        content_type: Optional[str] = None,
        content_disposition: Optional[str] = None,
        cache_control: Optional[str] = None,
        acl: Optional[str] = None,
    ) -> None:
        kwargs: dict[str, Any] = {"Bucket": bucket, "Key": key, "Body": body}
        if content_type:
            kwargs["ContentType"] = content_type
        if content_disposition:
            kwargs["ContentDisposition"] = content_disposition
        if cache_control:
            kwargs["CacheControl"] = cache_control
        if acl:
            kwargs["ACL"] = acl

        self._execute(lambda: self._client.put_object(**kwargs))

    def upload_file(
        self,
        bucket: str,
        key: str,
        local_path: str,
        **kwargs: Any,
    ) -> None:
        """Upload local_path under key. kwargs are passed to put_object."""
        if not local_path or not isinstance(local_path, str):
            raise InvalidArgumentError("local_path must be a non-empty string")

        try:
            f = open(local_path, "rb")
        except OSError as exc:
            raise ScanError(
                "Failed to open local file for upload",
                details={"local_path": local_path, "key": key},
                cause=exc,
            ) from exc

        # Read errors while the body streams surface from put_object as NetworkError.
        with f:
            self.put_object(bucket, key, f, **kwargs)

    def delete_object(self, bucket: str, key: str) -> None:
        self._execute(lambda: self._client.delete_object(Bucket=bucket, Key=key))

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except SiteSyncError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> SiteSyncError:
        if isinstance(exc, ClientError):
            info = _client_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (NoCredentialsError, PartialCredentialsError)):
            return AuthError("AWS credentials not available", cause=exc)

        if isinstance(exc, (BotoConnectionError, OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        if isinstance(exc, BotoCoreError):
            return ApiError("S3 client error", cause=exc)

        return ApiError("S3 API error", cause=exc)


def _entry_to_remote_object(entry: dict[str, Any]) -> RemoteObject:
    key = entry.get("Key")
    if not isinstance(key, str) or not key:
        raise ListingError(
            "Listing entry has no Key",
            details={"entry": {k: str(v) for k, v in entry.items()}},
        )

    etag = entry.get("ETag")
    if not isinstance(etag, str) or not etag.strip('"'):
        raise ListingError("Listing entry has no ETag", details={"key": key})

    size = entry.get("Size")
    return RemoteObject(
        key=key,
        fingerprint=etag.replace('"', ""),
        last_modified=entry.get("LastModified"),
        size=size if isinstance(size, int) else None,
    )


def _client_error_to_info(exc: ClientError) -> HttpErrorInfo:
    response = getattr(exc, "response", None) or {}
    error = response.get("Error") or {}
    metadata = response.get("ResponseMetadata") or {}

    status_code = metadata.get("HTTPStatusCode")
    if not isinstance(status_code, int):
        status_code = 0

    details: dict[str, Any] = {}
    if metadata.get("RequestId"):
        details["request_id"] = metadata["RequestId"]
    if error.get("BucketName"):
        details["bucket"] = error["BucketName"]
    if error.get("Key"):
        details["key"] = error["Key"]

    code = error.get("Code")
    message = error.get("Message")
    return HttpErrorInfo(
        status_code=status_code,
        code=code if isinstance(code, str) else None,
        message=message if isinstance(message, str) and message else None,
        details=details or None,
    )
