from django.apps import AppConfig


class DeliveryRoutingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'delivery_routing'
    verbose_name = 'Delivery Routing Service'
