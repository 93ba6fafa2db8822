from .annotation_schemas import (
    ANNOTATION_CONTEXT,
    ANNOTATION_TYPE,
    COLLECTION_TYPES,
    FRAGMENT_SELECTOR_TYPE,
    LOCATOR_TYPE,
    PAGE_TYPE,
    AnnotationCollectionDocument,
    AnnotationPageDocument,
    BookmarkDocument,
    FragmentSelectorDocument,
    LocatorDocument,
    TargetDocument,
)

__all__ = [
    "ANNOTATION_CONTEXT",
    "ANNOTATION_TYPE",
    "COLLECTION_TYPES",
    "FRAGMENT_SELECTOR_TYPE",
    "LOCATOR_TYPE",
    "PAGE_TYPE",
    "AnnotationCollectionDocument",
    "AnnotationPageDocument",
    "BookmarkDocument",
    "FragmentSelectorDocument",
    "LocatorDocument",
    "TargetDocument",
]
