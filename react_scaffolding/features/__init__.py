"""react-scaffolding feature steps -- one class per optional library.

``FEATURES`` lists the step classes in the order the pipeline runs them.
Wraps applied by later steps enclose those applied by earlier ones, so with
every feature selected ``main.tsx`` ends up as
``<Router><Provider store={store}><StrictMode><App /></StrictMode></Provider></Router>``.
"""

from react_scaffolding.features.base import Feature
from react_scaffolding.features.forms import ReactHookFormFeature
from react_scaffolding.features.header import HeaderFeature
from react_scaffolding.features.i18n import I18nFeature
from react_scaffolding.features.redux import ReduxFeature
from react_scaffolding.features.router import RouterFeature
from react_scaffolding.features.rtk_query import RtkQueryFeature
from react_scaffolding.features.shadcn import ShadcnFeature
from react_scaffolding.features.tailwind import TailwindFeature

FEATURES: tuple[type[Feature], ...] = (
    TailwindFeature,
    ShadcnFeature,
    ReduxFeature,
    RtkQueryFeature,
    I18nFeature,
    RouterFeature,
    ReactHookFormFeature,
    HeaderFeature,
)

__all__ = [
    "FEATURES",
    "Feature",
    "HeaderFeature",
    "I18nFeature",
    "ReactHookFormFeature",
    "ReduxFeature",
    "RouterFeature",
    "RtkQueryFeature",
    "ShadcnFeature",
    "TailwindFeature",
]
