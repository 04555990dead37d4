"""Template-based filter for city customers."""

from repokit.filters.specification import Specification
from repokit.models.domain import CityCustomer


class CustomerFilter(Specification[CityCustomer]):
    """
    Matches customers against a partially filled template.

    Only non-empty template fields (name, city) constrain the match;
    empty or None fields act as wildcards. The template id is ignored.
    """

    def __init__(self, template: CityCustomer):
        if template is None:
            raise ValueError("Filter template cannot be None")
        self.template = template

    def is_satisfied_by(self, item: CityCustomer) -> bool:
        if self.template.name and self.template.name != item.name:
            return False
        if self.template.city and self.template.city != item.city:
            return False
        return True
