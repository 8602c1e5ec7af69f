# # For running all tests
# python -m pytest delivery_routing/tests/
# python -m pytest delivery_routing/tests/ --ds delivery_routing.tests.test_settings

# # For Django's built-in test runner
# python manage.py test delivery_routing --settings=delivery_routing.tests.test_settings
