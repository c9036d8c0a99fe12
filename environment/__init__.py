"""Discovery of host metadata used to enrich metric dimensions"""
from .metadata import FileReader, MetadataEnricher, INDIRECTION_FILE_NAME

__all__ = [
    'FileReader',
    'MetadataEnricher',
    'INDIRECTION_FILE_NAME'
]
