from unittest.mock import patch

from django.test import SimpleTestCase

from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import AddResult
from delivery_routing.services.depot_service import DepotService


class DepotServiceTest(SimpleTestCase):
    def setUp(self):
        self.graph = DeliveryGraph()

    def test_resolve_depot_explicit(self):
        self.assertEqual(DepotService.resolve_depot('Kitchen'), 'Kitchen')

    def test_resolve_depot_default(self):
        self.assertEqual(DepotService.resolve_depot(), 'Depot')
        self.assertEqual(DepotService.resolve_depot(''), 'Depot')

    @patch('delivery_routing.settings.DEFAULT_DEPOT', 'Warehouse')
    def test_resolve_depot_from_settings(self):
        self.assertEqual(DepotService.resolve_depot(None), 'Warehouse')

    def test_ensure_depot_adds_missing_depot(self):
        with self.assertLogs('delivery_routing.services.depot_service', level='INFO') as cm:
            result = DepotService.ensure_depot(self.graph)
        self.assertEqual(result, AddResult.ADDED)
        self.assertTrue(self.graph.has_location('Depot'))
        self.assertIn("Setting up depot location 'Depot'", cm.output[0])

    def test_ensure_depot_keeps_existing_depot(self):
        self.graph.add_location('Depot')
        self.graph.add_location('A')
        self.graph.add_route('Depot', 'A', 2)

        result = DepotService.ensure_depot(self.graph)

        self.assertEqual(result, AddResult.ALREADY_EXISTS)
        self.assertEqual(self.graph.neighbors_of('Depot'), {'A': 2})

    def test_ensure_depot_custom_name(self):
        DepotService.ensure_depot(self.graph, depot='Kitchen')
        self.assertEqual(self.graph.locations(), ['Kitchen'])
