"""Static drink catalog loaded once at import time."""

from caffeine_guard.domain.drinks import Drink, DrinkCategory, DrinkTag

_DECAF = frozenset({DrinkTag.DECAF, DrinkTag.LOW_CAFFEINE})
_LOW = frozenset({DrinkTag.LOW_CAFFEINE})

DRINK_CATALOG: tuple[Drink, ...] = (
    # Brewed
    Drink("espresso_machine_home", "1 Espresso Pod", DrinkCategory.BREWED, 75, "Single shot from home espresso machine (1oz)."),
    Drink("moka_pot", "1-Cup Moka Pot", DrinkCategory.BREWED, 105, "Stovetop pressure-brewed coffee (2oz)."),
    Drink("drip_coffee", "Drip Coffee", DrinkCategory.BREWED, 80, "Classic filtered coffee brewed in a drip machine (8oz)."),
    Drink("pour_over", "Pour Over", DrinkCategory.BREWED, 85, "Hand-poured filter coffee (8oz)."),
    Drink("french_press", "French Press", DrinkCategory.BREWED, 100, "Full-bodied coffee steeped in hot water, then pressed (8oz)."),
    Drink("decaf_drip_coffee", "Decaf Drip", DrinkCategory.BREWED, 5, "Decaffeinated drip coffee (8oz).", _DECAF),
    # Espresso
    Drink("single_espresso", "Single Espresso", DrinkCategory.ESPRESSO, 75, "Single concentrated shot of coffee (1oz)."),
    Drink("double_espresso", "Double Espresso", DrinkCategory.ESPRESSO, 150, "Double concentrated shot of coffee (2oz)."),
    Drink("ristretto", "Ristretto", DrinkCategory.ESPRESSO, 65, "Short extraction espresso shot with concentrated flavor (1oz)."),
    Drink("americano_8oz", "Small Americano", DrinkCategory.ESPRESSO, 75, "Single shot espresso diluted with hot water (8oz)."),
    Drink("americano_12oz", "Regular Americano", DrinkCategory.ESPRESSO, 150, "Double shot espresso diluted with hot water (12oz)."),
    Drink("affogato", "Affogato", DrinkCategory.ESPRESSO, 75, "Espresso shot over ice cream (3-4oz)."),
    Drink("cortado", "Cortado", DrinkCategory.ESPRESSO, 150, "Double shot espresso with equal parts warm milk (4oz)."),
    Drink("flat_white", "Flat White", DrinkCategory.ESPRESSO, 130, "Double shot espresso with velvety microfoam (6oz)."),
    Drink("decaf_espresso", "Decaf Espresso", DrinkCategory.ESPRESSO, 3, "Decaffeinated espresso shot (1oz).", _DECAF),
    # Milk
    Drink("cappuccino", "Cappuccino", DrinkCategory.MILK, 75, "Single shot espresso with equal parts steamed milk and foam (8oz)."),
    Drink("cafe_au_lait", "Café au Lait", DrinkCategory.MILK, 80, "Strong coffee with steamed milk (8oz)."),
    Drink("latte", "Latte", DrinkCategory.MILK, 75, "Single shot espresso with steamed milk and light foam (12oz)."),
    Drink("caramel_macchiato", "Macchiato", DrinkCategory.MILK, 75, "Steamed milk with espresso, vanilla, and caramel drizzle (12oz)."),
    Drink("mocha", "Mocha", DrinkCategory.MILK, 95, "Single shot espresso with chocolate and steamed milk (12oz)."),
    Drink("shaken_espresso", "Shaken Espresso", DrinkCategory.MILK, 150, "Double shot espresso shaken with ice and milk (12oz)."),
    Drink("chai_latte", "Chai Tea Latte", DrinkCategory.MILK, 50, "Spiced black tea blended with steamed milk (12oz).", _LOW),
    Drink("matcha_latte", "Matcha Latte", DrinkCategory.MILK, 80, "Stone-ground green tea whisked with milk (12oz)."),
    Drink("decaf_latte", "Decaf Latte", DrinkCategory.MILK, 5, "Latte made with decaf espresso.", _DECAF),
    # Cold
    Drink("iced_americano", "Iced Americano", DrinkCategory.COLD, 150, "Double shot espresso with cold water over ice (12oz)."),
    Drink("nitro_cold_brew", "Nitro Cold Brew", DrinkCategory.COLD, 150, "Cold brew infused with nitrogen for creamy texture (12oz)."),
    Drink("cold_brew", "Cold Brew", DrinkCategory.COLD, 155, "Slow-steeped, super smooth cold coffee (12oz)."),
    # Tea
    Drink("green_tea", "Green Tea", DrinkCategory.TEA, 25, "Light and grassy with gentle caffeine (8oz).", _LOW),
    Drink("oolong_tea", "Oolong Tea", DrinkCategory.TEA, 37, "Semi-oxidized tea with floral notes (8oz).", _LOW),
    Drink("black_tea", "Black Tea", DrinkCategory.TEA, 47, "Bold and robust with a strong finish (8oz).", _LOW),
    Drink("earl_grey", "Earl Grey Tea", DrinkCategory.TEA, 47, "Black tea infused with citrusy bergamot (8oz).", _LOW),
    Drink("masala_chai", "Indian Masala Chai", DrinkCategory.TEA, 50, "Spiced black tea with aromatic spices (8oz).", _LOW),
    Drink("iced_tea", "Iced Tea", DrinkCategory.TEA, 60, "Chilled black tea served over ice (12oz).", _LOW),
    Drink("boba_tea", "Boba Tea", DrinkCategory.TEA, 35, "Bubble tea with tapioca pearls (12oz).", _LOW),
    # Specialty
    Drink("turkish_coffee", "Turkish Coffee", DrinkCategory.SPECIALTY, 50, "Unfiltered coffee simmered in a cezve (2-5oz)."),
    Drink("vietnamese_coffee", "Vietnamese Coffee", DrinkCategory.SPECIALTY, 150, "Strong dark roast coffee with sweetened condensed milk (8oz)."),
    Drink("frappuccino", "Frappuccino", DrinkCategory.SPECIALTY, 70, "Blended iced coffee sweetened with flavored syrup (12oz)."),
    # Energy
    Drink("red_bull", "Red Bull", DrinkCategory.ENERGY, 80, "Classic energy drink, 8.4 fl oz can."),
    Drink("monster_energy", "Monster Energy", DrinkCategory.ENERGY, 160, "High-caffeine energy drink, 16 fl oz can."),
    Drink("rockstar", "Rockstar", DrinkCategory.ENERGY, 160, "Performance energy drink, 16 fl oz can."),
    Drink("five_hour_energy", "5-Hour Energy", DrinkCategory.ENERGY, 200, "Concentrated energy shot, 1.93 fl oz bottle."),
    Drink("bang_energy", "Bang Energy", DrinkCategory.ENERGY, 300, "Super creatine energy drink, 16 fl oz can."),
    Drink("celsius", "Celsius", DrinkCategory.ENERGY, 200, "Fitness energy drink, 12 fl oz can."),
    # Soda
    Drink("coke", "Coca-Cola", DrinkCategory.SODA, 34, "Classic cola, 12 fl oz can.", _LOW),
    Drink("pepsi", "Pepsi", DrinkCategory.SODA, 38, "Cola beverage, 12 fl oz can.", _LOW),
    Drink("dr_pepper", "Dr Pepper", DrinkCategory.SODA, 41, "Unique blend of 23 flavors, 12 fl oz can.", _LOW),
    Drink("mountain_dew", "Mountain Dew", DrinkCategory.SODA, 54, "Citrus soda with caffeine, 12 fl oz can.", _LOW),
    Drink("diet_coke", "Diet Coke", DrinkCategory.SODA, 46, "Sugar-free cola, 12 fl oz can.", _LOW),
    Drink("diet_pepsi", "Diet Pepsi", DrinkCategory.SODA, 36, "Sugar-free cola, 12 fl oz can.", _LOW),
    Drink("cherry_coke", "Cherry Coke", DrinkCategory.SODA, 34, "Cherry-flavored cola, 12 fl oz can.", _LOW),
    Drink("sprite", "Sprite", DrinkCategory.SODA, 0, "Caffeine-free lemon-lime soda, 12 fl oz can.", _LOW),
    Drink("root_beer", "Root Beer", DrinkCategory.SODA, 0, "Traditional root beer, 12 fl oz can.", _LOW),
    Drink("orange_soda", "Orange Soda", DrinkCategory.SODA, 0, "Orange-flavored soda, 12 fl oz can.", _LOW),
)  # fmt: skip

_BY_ID = {drink.id: drink for drink in DRINK_CATALOG}


class UnknownDrinkError(KeyError):
    """Raised when a drink id is not in the catalog."""


def get_drink(drink_id: str) -> Drink:
    """Return a catalog drink by id or raise UnknownDrinkError."""
    try:
        return _BY_ID[drink_id]
    except KeyError:
        raise UnknownDrinkError(f"Unknown drink: {drink_id}") from None


def drinks_in_category(category: DrinkCategory) -> list[Drink]:
    """Return catalog drinks in a category, in catalog order."""
    return [drink for drink in DRINK_CATALOG if drink.category == category]
