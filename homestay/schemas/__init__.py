from homestay.schemas.property import ImportRequest, ImportResult, PropertySummary, PropertyDetail, CatalogEntry
from homestay.schemas.property_import import PropertyImportDocument
