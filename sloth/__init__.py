from .errors import ConsumedError, LazyError, PoisonedError, ReentrantEvaluationError
from .lazy import Lazy
from .properties import lazy, lazy_property
from .views import ReadOnlyView
