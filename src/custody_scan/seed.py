"""Demo fleet and job orders loaded at startup."""

from custody_scan.domain.fleet import Vehicle
from custody_scan.domain.shipments import LineItem, Shipment

DEMO_VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(id="TRUCK-A", name="Truck A (North)", color="blue"),
    Vehicle(id="TRUCK-B", name="Truck B (South)", color="green"),
    Vehicle(id="TRUCK-C", name="Truck C (City)", color="purple"),
    Vehicle(id="TRUCK-D", name="Express Van", color="orange"),
)

DEMO_SHIPMENTS: tuple[Shipment, ...] = (
    Shipment(
        id="JOB-KL-001",
        destination="General Hospital KL - OT Room 3",
        expected_vehicle_id="TRUCK-A",
        items=(
            LineItem(name="Medical Gas Alarm Panel", quantity=1),
            LineItem(name="Copper Pipes 15mm", quantity=20),
        ),
    ),
    Shipment(
        id="JOB-SJ-102",
        destination="Subang Jaya Med Center",
        expected_vehicle_id="TRUCK-B",
        items=(LineItem(name="Surgical Light Kit", quantity=1),),
    ),
    Shipment(
        id="JOB-KL-003",
        destination="General Hospital KL - Ward 4",
        expected_vehicle_id="TRUCK-A",
        items=(
            LineItem(name="HVAC Filters", quantity=12),
            LineItem(name="Duct Tape", quantity=5),
        ),
    ),
    Shipment(
        id="JOB-PN-104",
        destination="Penang General",
        expected_vehicle_id="TRUCK-C",
        items=(
            LineItem(name="Reception Desk Legs", quantity=4),
            LineItem(name="Table Top", quantity=1),
        ),
    ),
)
