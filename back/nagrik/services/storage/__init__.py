# Local application imports
from nagrik.services.storage.s3_service import PhotoStorage, S3PhotoStorage, build_photo_key

__all__ = ["PhotoStorage", "S3PhotoStorage", "build_photo_key"]
