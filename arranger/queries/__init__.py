from arranger.queries.common import *
from arranger.queries.tree import *
