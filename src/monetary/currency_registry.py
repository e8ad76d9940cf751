from monetary.currency import Currency


# Well-known fiat currencies
USD = Currency("USD", "$")
EUR = Currency("EUR", "€")
JPY = Currency("JPY", "¥")
CNY = Currency("CNY", "元")
GBP = Currency("GBP", "£")

# Register all predefined currencies
Currency.register(USD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(JPY, overwrite=True)
Currency.register(CNY, overwrite=True)
Currency.register(GBP, overwrite=True)
