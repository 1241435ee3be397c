"""
Core of the recipe book application.

This package contains everything that is independent of the UI toolkit:
- models: Category, Ingredient, Recipe value records
- seed: sample categories and recipes present at start
- store: in-memory recipe store with id assignment
- navigation: typed routes and the back-stack
- forms: Add screen draft state and validation
- errors: ValidationError raised by incomplete drafts
- app: application root wiring store, navigator and screen callbacks
- formatting: rating glyphs and ingredient lines shared by the screens
- config / events: environment configuration and UI event logging
"""
