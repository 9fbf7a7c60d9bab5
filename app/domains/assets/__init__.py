from app.domains.assets.entities import Asset
from app.domains.assets.schemas import AssetResponse, AssetUpdate
from app.domains.assets.services import AssetService

__all__ = ["Asset", "AssetResponse", "AssetUpdate", "AssetService"]
