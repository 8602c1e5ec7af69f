import unittest
from unittest.mock import MagicMock, patch

from delivery_routing.core.dijkstra import DijkstraPathFinder
from delivery_routing.core.exceptions import MissingDepotError
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import DeliveryOrder
from delivery_routing.services.route_optimization_service import RouteOptimizationService


class RouteOptimizationServiceTest(unittest.TestCase):
    def setUp(self):
        self.graph = DeliveryGraph.from_routes(
            ['Depot', 'A', 'B', 'C'],
            [('Depot', 'A', 5), ('A', 'B', 3), ('B', 'C', 2), ('Depot', 'C', 20)]
        )
        self.service = RouteOptimizationService(self.graph)

    def test_optimize_route(self):
        order = DeliveryOrder(pickup_location='A', dropoff_location='C', order_id=1001, price=12.5)
        plan = self.service.optimize_route(order, depot='Depot')

        self.assertEqual(plan.depot, 'Depot')
        self.assertEqual(plan.order_id, 1001)
        self.assertEqual(plan.pickup_segment.path, ['Depot', 'A'])
        self.assertEqual(plan.pickup_segment.distance, 5)
        self.assertEqual(plan.delivery_segment.path, ['A', 'B', 'C'])
        self.assertEqual(plan.delivery_segment.distance, 5)
        self.assertEqual(plan.total_distance, 10)
        self.assertTrue(plan.is_complete)

    def test_optimize_route_uses_configured_depot(self):
        self.graph.add_location('Hub')
        self.graph.add_route('Hub', 'B', 1)
        order = DeliveryOrder(pickup_location='A', dropoff_location='C')

        with patch('delivery_routing.settings.DEFAULT_DEPOT', 'Hub'):
            plan = self.service.optimize_route(order)

        self.assertEqual(plan.depot, 'Hub')
        self.assertEqual(plan.pickup_segment.path, ['Hub', 'B', 'A'])
        self.assertEqual(plan.pickup_segment.distance, 4)
        self.assertEqual(plan.total_distance, 9)

    def test_optimize_route_default_depot(self):
        plan = self.service.optimize_route(DeliveryOrder('A', 'C'))
        self.assertEqual(plan.depot, 'Depot')
        self.assertEqual(plan.total_distance, 10)

    def test_missing_depot(self):
        graph = DeliveryGraph.from_routes(['A', 'C'], [('A', 'C', 1)])
        service = RouteOptimizationService(graph)
        with self.assertLogs('delivery_routing.services.route_optimization_service', level='ERROR'):
            with self.assertRaises(MissingDepotError) as ctx:
                service.optimize_route(DeliveryOrder('A', 'C'), depot='Depot')
        self.assertEqual(ctx.exception.depot, 'Depot')

    def test_isolated_pickup_is_unreachable(self):
        self.graph.add_location('Z')
        with self.assertLogs('delivery_routing.services.route_optimization_service', level='WARNING') as cm:
            plan = self.service.optimize_route(DeliveryOrder('Z', 'C'), depot='Depot')

        self.assertEqual(plan.pickup_segment.path, [])
        self.assertIsNone(plan.pickup_segment.distance)
        self.assertFalse(plan.pickup_segment.is_reachable)
        self.assertIsNone(plan.delivery_segment.distance)
        self.assertIsNone(plan.total_distance)
        self.assertFalse(plan.is_complete)
        self.assertTrue(any("N/A" in line for line in cm.output))

    def test_unreachable_dropoff_keeps_reachable_segment(self):
        self.graph.add_location('Z')
        plan = self.service.optimize_route(DeliveryOrder('A', 'Z'), depot='Depot')

        self.assertEqual(plan.pickup_segment.distance, 5)
        self.assertTrue(plan.pickup_segment.is_reachable)
        self.assertIsNone(plan.delivery_segment.distance)
        # Unavailable total, never the partial sum of the reachable segment
        self.assertIsNone(plan.total_distance)

    def test_unknown_pickup_location_is_unreachable(self):
        plan = self.service.optimize_route(DeliveryOrder('Nowhere', 'C'), depot='Depot')
        self.assertIsNone(plan.pickup_segment.distance)
        self.assertIsNone(plan.delivery_segment.distance)
        self.assertIsNone(plan.total_distance)

    def test_pickup_at_depot(self):
        plan = self.service.optimize_route(DeliveryOrder('Depot', 'B'), depot='Depot')
        self.assertEqual(plan.pickup_segment.path, ['Depot'])
        self.assertEqual(plan.pickup_segment.distance, 0)
        self.assertEqual(plan.total_distance, 8)

    def test_optimize_route_is_read_only(self):
        before = self.graph.to_dict()
        order = DeliveryOrder('A', 'C', order_id=7)
        self.service.optimize_route(order, depot='Depot')
        self.assertEqual(self.graph.to_dict(), before)
        self.assertEqual(order, DeliveryOrder('A', 'C', order_id=7))

    def test_empty_path_is_not_summed(self):
        path_finder = MagicMock(spec=DijkstraPathFinder)
        path_finder.shortest_path.return_value = []
        service = RouteOptimizationService(self.graph, path_finder=path_finder)

        segment = service.plan_segment('Depot', 'C')

        self.assertIsNone(segment.distance)
        path_finder.path_distance.assert_not_called()

    def test_broken_path_from_path_finder_is_unreachable(self):
        path_finder = MagicMock(spec=DijkstraPathFinder)
        path_finder.shortest_path.return_value = ['Depot', 'B']
        path_finder.path_distance.side_effect = DijkstraPathFinder.path_distance
        service = RouteOptimizationService(self.graph, path_finder=path_finder)

        plan = service.optimize_route(DeliveryOrder('B', 'B'), depot='Depot')

        self.assertIsNone(plan.pickup_segment.distance)
        self.assertIsNone(plan.total_distance)


if __name__ == '__main__':
    unittest.main()
