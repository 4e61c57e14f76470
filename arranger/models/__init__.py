"""
Types here are instantiated as subclasses of pydantic's `BaseModel`.
This means we get runtime deserialization and validation for free just by using type declarations
and a couple of pydantic helpers.

Use these in your code as python objects, then serialize to json by converting to a dict with `.dict()`
"""

from arranger.models.Claim import *
from arranger.models.Config import *
from arranger.models.MerkleTree import *
from arranger.models.NestedDict import *
from arranger.models.types import *
from arranger.models.Writer import *
