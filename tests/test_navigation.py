"""
Integration tests for the full tenant and owner workflows.

Each test drives the directory store the way the UI would, from sign-in
through the landing screen to the dashboards.
"""

from rental_manager.schemas.payment_schemas import PaymentStatus
from rental_manager.services.navigation_service import View


class TestResolveView:
    """Tests for landing screen selection"""

    def test_signed_out(self, directory):
        assert directory.resolve_view() == View.AUTH

    def test_owner(self, directory, owner_session):
        assert directory.resolve_view(owner_session) == View.OWNER_DASHBOARD

    def test_unregistered_tenant(self, directory, tenant_session):
        assert directory.resolve_view(tenant_session) == View.TENANT_REGISTRATION

    def test_registered_tenant(self, directory, tenant_session):
        directory.register_current_tenant(
            tenant_session,
            aadhar_number="123412341234",
            company="Acme",
            family_members_count=1,
            room_number="101",
            room_type="single",
        )

        assert directory.resolve_view(tenant_session) == View.TENANT_DASHBOARD

    def test_uses_stored_session_when_omitted(self, directory):
        directory.login("owner@building.com", "owner123")

        assert directory.resolve_view() == View.OWNER_DASHBOARD

        directory.logout()
        assert directory.resolve_view() == View.AUTH


class TestCompleteWorkflow:
    """Sign up, register, pay, and check the owner's view"""

    def test_new_tenant_workflow(self, directory):
        # Step 1: Sign up, which signs the tenant in
        signup = directory.sign_up("Ravi", "ravi@example.com", "ravi1234", "9123456780", "tenant")
        assert signup.success
        session = directory.get_current_session()
        assert directory.resolve_view(session) == View.TENANT_REGISTRATION

        # Step 2: Pick a vacant double and register
        room = directory.get_available_rooms("double")[0]
        result = directory.register_current_tenant(
            session,
            aadhar_number="555566667777",
            company="Initech",
            family_members_count=4,
            room_number=room.room_number,
            room_type=room.room_type,
        )
        assert result.success
        assert directory.resolve_view(session) == View.TENANT_DASHBOARD

        # Step 3: Upload this month's rent proof
        assert directory.submit_rent_payment(session.user_id, "blob:rent").success
        assert directory.tenant_payment_status(session.user_id) == PaymentStatus.PAID

        # Step 4: Owner sees the room occupied and paid
        directory.logout()
        directory.login("owner@building.com", "owner123")
        assert directory.resolve_view() == View.OWNER_DASHBOARD
        assert directory.room_payment_status(room.room_number) == PaymentStatus.PAID
        occupancy = directory.occupancy_stats()
        assert occupancy.occupied == 1
        revenue = directory.revenue_stats()
        assert revenue.current == 12000
        assert revenue.expected == 12000
        assert revenue.pending == 0

    def test_forgot_password_workflow(self, directory):
        reset = directory.initiate_password_reset("9876543212")
        assert reset.success

        check = directory.validate_reset_code(reset.reset_code)
        assert check.valid and check.user_id == "3"

        assert directory.reset_password(reset.reset_code, "fresh-pass").success
        assert directory.login("tenant2@building.com", "fresh-pass").uid == "3"
