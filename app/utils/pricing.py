def calculate_total_amount(base_price, selected_foods, selected_theme=None):
    """Hall base price plus every food line plus the optional theme."""
    food_total = sum(item.quantity * item.price for item in selected_foods)
    theme_price = selected_theme.price if selected_theme else 0

    return base_price + food_total + theme_price
