from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, TextIO
from decimal import Decimal
import sys


# ==================== Enums ====================

class DecoratorKind(Enum):
    """Kinds of ingredient decorators"""
    ORGANIC = "ORGANIC"
    GLUTEN_FREE = "GLUTEN_FREE"


class RecipeKind(Enum):
    """Semantic label for a composite"""
    RECIPE = "RECIPE"
    MENU = "MENU"


# ==================== Component Interface ====================

class Priceable(ABC):
    """Anything with a name, a description and a price that can render itself"""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_price(self) -> Decimal:
        pass

    @abstractmethod
    def render(self, out: Optional[TextIO] = None) -> None:
        """Write a human readable representation to out (stdout by default)"""
        pass

    def _summary_line(self) -> str:
        return f"{self.get_name()} - {self.get_description()} (${self.get_price():.2f})"


# ==================== Leaf ====================

class Ingredient(Priceable):
    """A single priced item with no children"""

    def __init__(self, name: str, description: str, price):
        self._name = name
        self._description = description
        self._price = Decimal(str(price))

    def get_name(self) -> str:
        return self._name

    def get_description(self) -> str:
        return self._description

    def get_price(self) -> Decimal:
        return self._price

    def render(self, out: Optional[TextIO] = None) -> None:
        print(self._summary_line(), file=out or sys.stdout)

    def __repr__(self) -> str:
        return f"Ingredient({self._name}, ${self._price})"


# ==================== Decorator Pattern ====================

class IngredientDecorator(Priceable):
    """
    Wraps exactly one component.
    Name, description and price are read straight through from the wrapped
    component; render() appends one annotation line after the child's output.
    """

    def __init__(self, ingredient: Priceable):
        self._ingredient = ingredient

    def get_wrapped(self) -> Priceable:
        return self._ingredient

    def get_name(self) -> str:
        return self._ingredient.get_name()

    def get_description(self) -> str:
        return self._ingredient.get_description()

    def get_price(self) -> Decimal:
        return self._ingredient.get_price()

    @abstractmethod
    def get_annotation(self) -> str:
        """Line appended after the wrapped component's output"""
        pass

    def render(self, out: Optional[TextIO] = None) -> None:
        out = out or sys.stdout
        self._ingredient.render(out)
        print(self.get_annotation(), file=out)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._ingredient!r})"


class OrganicDecorator(IngredientDecorator):
    """Marks the wrapped component as organic"""

    def get_annotation(self) -> str:
        return "- organic"


class GlutenFreeDecorator(IngredientDecorator):
    """Marks the wrapped component as gluten-free"""

    def get_annotation(self) -> str:
        return "- gluten-free"


_DECORATORS = {
    DecoratorKind.ORGANIC: OrganicDecorator,
    DecoratorKind.GLUTEN_FREE: GlutenFreeDecorator,
}


def decorate(kind: DecoratorKind, ingredient: Priceable) -> IngredientDecorator:
    """Wrap a component in the decorator registered for kind"""
    decorator_class = _DECORATORS.get(kind)
    if decorator_class is None:
        raise ValueError(f"Unknown decorator kind: {kind}")
    return decorator_class(ingredient)


# ==================== Composite Pattern ====================

class Recipe(Priceable):
    """
    Ordered collection of components.

    The price is recomputed from the children on every read, so it always
    matches the sum of their current prices even if a nested recipe changes
    after it was added. Children are shared references: the same ingredient
    may appear in several recipes.
    """

    def __init__(self, name: str, description: str,
                 kind: RecipeKind = RecipeKind.RECIPE):
        self._name = name
        self._description = description
        self._kind = kind
        self._components: List[Priceable] = []

    def get_name(self) -> str:
        return self._name

    def get_description(self) -> str:
        return self._description

    def get_kind(self) -> RecipeKind:
        return self._kind

    def get_price(self) -> Decimal:
        return sum((component.get_price() for component in self._components), Decimal('0'))

    def get_components(self) -> List[Priceable]:
        return self._components.copy()

    def add_component(self, component: Priceable) -> None:
        """Append a component; rejects anything that would create a cycle"""
        if component is self or _subtree_contains(component, self):
            raise ValueError(
                f"Cannot add {component.get_name()} to {self._name}: it would contain itself")
        self._components.append(component)

    def remove_component(self, component: Priceable) -> bool:
        """Remove the first occurrence (by identity). Returns False if absent."""
        for index, existing in enumerate(self._components):
            if existing is component:
                del self._components[index]
                return True
        return False

    def contains(self, component: Priceable) -> bool:
        """Check whether component appears anywhere below this recipe"""
        return _subtree_contains(self, component)

    def render(self, out: Optional[TextIO] = None) -> None:
        out = out or sys.stdout
        print(self._summary_line(), file=out)
        print("Contents:", file=out)
        print(file=out)
        for component in self._components:
            component.render(out)
        print(file=out)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return f"Recipe({self._name}, {len(self._components)} components)"


def _subtree_contains(root: Priceable, target: Priceable) -> bool:
    """Identity search below root, looking through decorators"""
    stack = [root]
    seen = set()
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))

        if isinstance(node, IngredientDecorator):
            children = [node.get_wrapped()]
        elif isinstance(node, Recipe):
            children = node._components
        else:
            continue

        for child in children:
            if child is target:
                return True
            stack.append(child)
    return False


def create_menu(name: str, description: str) -> Recipe:
    """A menu is just a recipe labelled as a top-level collection"""
    return Recipe(name, description, kind=RecipeKind.MENU)


# ==================== Demo ====================

def main():
    """Demo the recipe management system"""
    print("=== Recipe Management (Composite + Decorator) Demo ===\n")

    # Create some ingredients
    flour = Ingredient("Flour", "Organic flour", "2.00")
    sugar = Ingredient("Sugar", "White sugar", "1.50")
    eggs = Ingredient("Eggs", "Free-range eggs", "3.00")

    # Decorate ingredients
    organic_flour = decorate(DecoratorKind.ORGANIC, flour)
    gluten_free_flour = decorate(DecoratorKind.GLUTEN_FREE, flour)
    organic_sugar = OrganicDecorator(sugar)

    cake = Recipe("Cake", "A delicious cake")
    cake.add_component(organic_flour)
    cake.add_component(organic_sugar)
    cake.add_component(eggs)

    # sugar and eggs are shared with the cake
    cookies = Recipe("Cookies", "Some tasty cookies")
    cookies.add_component(gluten_free_flour)
    cookies.add_component(sugar)
    cookies.add_component(eggs)

    menu = create_menu("Menu", "Our menu")
    menu.add_component(cake)
    menu.add_component(cookies)

    print("--- Full Menu ---")
    menu.render()

    print("--- Removing Eggs from Cake ---")
    cake.remove_component(eggs)
    cake.render()
    print(f"Menu total is now ${menu.get_price():.2f}")

    print("\n--- Cycle Protection ---")
    try:
        cake.add_component(menu)
    except ValueError as e:
        print(f"Rejected: {e}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user")
    except Exception as e:
        print(f"\n\nError occurred: {e}")
        import traceback
        traceback.print_exc()


# Recipe Management - Design Notes
#
# 1. Priceable is the single interface shared by leaves, decorators and recipes,
#    so callers render or price any node without knowing its kind.
# 2. Decorators hold one child and never cache its values; a decorated recipe
#    reports the recipe's current price.
# 3. Recipe prices are summed on read. Removing a component that is not
#    present leaves both the list and the price untouched.
# 4. Menu is a Recipe with RecipeKind.MENU rather than a subclass.
# 5. add_component walks the candidate's subtree and refuses a node that
#    already contains the recipe, so the tree can never become cyclic.
