from .array_source import ArrayFeatureSource
from .dataframe_source import DataFrameFeatureSource
from .loader import load_feature_frame

__all__ = [
    "ArrayFeatureSource",
    "DataFrameFeatureSource",
    "load_feature_frame",
]
