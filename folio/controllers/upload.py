"""Media upload endpoints backed by the configured object store."""

from pathlib import Path
from typing import Annotated

from litestar import Controller, Request, delete, post
from litestar.datastructures import UploadFile
from litestar.enums import RequestEncodingType
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK

from folio.auth.guards import admin_guard
from folio.lib.exceptions import InvalidRequestError
from folio.lib.uploads import Uploader
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS
from folio.schemas.upload import UploadResponse

MultipartBody = Body(media_type=RequestEncodingType.MULTI_PART)


class UploadController(Controller):
    path = "/upload"
    tags = ["upload"]
    guards = [admin_guard]

    @post("/image")
    async def upload_image(
        self,
        request: Request,
        data: Annotated[dict[str, UploadFile], MultipartBody],
    ) -> dict:
        upload = data.get("file")
        if upload is None:
            raise InvalidRequestError("No file provided")

        uploader: Uploader = request.app.state.uploader
        stored = await uploader.upload(upload.filename, upload.content_type, await upload.read())
        return serialize(UploadResponse, stored)

    @post("/images")
    async def upload_images(
        self,
        request: Request,
        data: Annotated[list[UploadFile], MultipartBody],
    ) -> list[dict]:
        files = data or []
        uploader: Uploader = request.app.state.uploader
        if not files:
            raise InvalidRequestError("No files provided")
        if len(files) > uploader.config.max_files_per_request:
            raise InvalidRequestError(
                f"At most {uploader.config.max_files_per_request} files can be uploaded at once"
            )

        contents = [(upload, await upload.read()) for upload in files]
        # Validate everything before storing anything
        for upload, content in contents:
            uploader.validate(upload.content_type, len(content))

        stored = [
            await uploader.upload(upload.filename, upload.content_type, content)
            for upload, content in contents
        ]
        return serialize_many(UploadResponse, stored)

    @delete("/{key:path}", status_code=HTTP_200_OK)
    async def delete_file(self, request: Request, key: Path) -> dict:
        uploader: Uploader = request.app.state.uploader
        await uploader.delete(str(key).lstrip("/"))
        return SUCCESS
