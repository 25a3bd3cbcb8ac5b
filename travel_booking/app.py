import logging
from datetime import date, datetime, time, timedelta

import streamlit as st

from travel_booking.config import (
    DEBUG_MODE,
    LOCAL_MODE,
    configure_logging,
    delete_setting,
    get_setting,
    get_supabase_credentials,
    save_setting,
)
from travel_booking.errors import ConfigurationError, TravelBookingError
from travel_booking.models import (
    BUDGET_LABELS,
    DESTINATION_TYPES,
    MAX_TRAVELERS,
    ActivityList,
    BudgetBucket,
    Destination,
    TripPlanForm,
    TripType,
)
from travel_booking.services import (
    AuthSession,
    BookingService,
    ReviewService,
    TripPlanService,
    load_destinations,
    load_featured_destinations,
)
from travel_booking.services.filters import (
    ALL,
    PRICE_RANGE_LABELS,
    DestinationFilters,
    PriceRange,
    country_options,
    filter_destinations,
    filter_reviews,
)
from travel_booking.services.formatting import initials, star_bar, time_ago
from travel_booking.services.pricing import calculate_total_price, format_price, trip_days
from travel_booking.services.profile import (
    ProfileStats,
    booking_length_days,
    load_bookings,
    past_trips,
    pending_bookings,
    upcoming_trips,
)
from travel_booking.storage import SupabaseStore, create_supabase_client

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Wanderlust Travel",
    page_icon="✈️",
    layout="wide",
    initial_sidebar_state="expanded",
)

HOME_STATS = [
    ("Destinations", "1000+"),
    ("Happy Travelers", "50K+"),
    ("Countries", "150+"),
    ("Reviews", "25K+"),
]

# Session-state keys holding fetched rows; dropping one triggers a refetch
DATA_KEYS = ["featured", "destinations", "reviews", "bookings", "trip_plans"]


def notify(error: TravelBookingError) -> None:
    """Show a failed operation to the user and log it."""
    st.toast(error.user_message, icon="⚠️")
    st.error(error.user_message)
    logger.info("Operation rejected: %s", error.user_message)


def get_backend_credentials() -> tuple[str, str]:
    """Credentials entered this session take precedence over stored ones."""
    entered = st.session_state.get("backend_credentials")
    if entered and all(entered):
        return entered
    return get_supabase_credentials()


def connect_backend() -> bool:
    """Create the backend client, store and auth session for this browser session."""
    try:
        url, key = get_backend_credentials()
        client = create_supabase_client(url, key)
    except ConfigurationError as e:
        st.session_state.config_error = e.user_message
        return False
    except Exception as e:
        logger.exception("Failed to create backend client")
        st.session_state.config_error = f"Failed to connect to backend: {e}"
        return False

    st.session_state.store = SupabaseStore(client)
    st.session_state.auth = AuthSession(client)
    st.session_state.auth.restore()
    st.session_state.config_error = None
    clear_cached_data()
    return True


def clear_cached_data(*keys: str) -> None:
    for key in keys or DATA_KEYS:
        st.session_state.pop(key, None)


def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = None
        st.session_state.auth = None
        st.session_state.config_error = None
        connect_backend()
    if "activities" not in st.session_state:
        st.session_state.activities = ActivityList()


def fetch_once(key: str, loader):
    """Fetch rows into session state on first render only.

    A failed fetch is reported once and leaves an empty list behind.
    """
    if key not in st.session_state:
        try:
            st.session_state[key] = loader()
        except TravelBookingError as e:
            notify(e)
            st.session_state[key] = []
    return st.session_state[key]


def render_account(auth: AuthSession | None):
    """Render sign-in / sign-up / sign-out in the sidebar."""
    st.subheader("Account")
    if auth is None:
        st.caption("Connect a backend in Settings to sign in")
        return

    if auth.is_authenticated:
        st.markdown(f"**{initials(auth.user.label)}** · {auth.user.label}")
        if auth.user.email and auth.user.email != auth.user.label:
            st.caption(auth.user.email)
        if st.button("Sign Out", key="sign_out", use_container_width=True):
            auth.sign_out()
            clear_cached_data("bookings", "trip_plans")
            st.rerun()
        return

    sign_in_tab, sign_up_tab = st.tabs(["Sign In", "Sign Up"])
    with sign_in_tab:
        with st.form("sign_in_form"):
            email = st.text_input("Email", key="sign_in_email")
            password = st.text_input("Password", type="password", key="sign_in_password")
            if st.form_submit_button("Sign In", use_container_width=True):
                try:
                    auth.sign_in(email, password)
                    st.rerun()
                except TravelBookingError as e:
                    notify(e)
    with sign_up_tab:
        with st.form("sign_up_form"):
            display_name = st.text_input("Display name", key="sign_up_name")
            email = st.text_input("Email", key="sign_up_email")
            password = st.text_input("Password", type="password", key="sign_up_password")
            if st.form_submit_button("Create Account", use_container_width=True):
                try:
                    user = auth.sign_up(email, password, display_name)
                    if user:
                        st.rerun()
                    else:
                        st.info("Check your email to confirm your account, then sign in.")
                except TravelBookingError as e:
                    notify(e)


def render_sidebar():
    """Render the sidebar with account and connection status."""
    with st.sidebar:
        st.title("✈️ Wanderlust")

        mode_parts = ["Local" if LOCAL_MODE else "Remote"]
        if DEBUG_MODE:
            mode_parts.append("Debug")
        st.caption(f"Mode: {' | '.join(mode_parts)}")

        st.markdown("---")
        render_account(st.session_state.auth)

        st.markdown("---")
        st.subheader("Backend")
        if st.session_state.store:
            st.success("Connected")
            if st.button("🔄 Refresh data", key="refresh_data", use_container_width=True):
                clear_cached_data()
                st.rerun()
        else:
            st.warning(st.session_state.config_error or "Not connected")
            st.caption("Go to Settings tab to configure")


def render_destination_card(destination: Destination, key_prefix: str, bookable: bool = True):
    with st.container(border=True):
        if destination.image_url:
            st.image(destination.image_url, use_container_width=True)
        badges = [f"`{destination.type}`"]
        if destination.trending:
            badges.append("📈 **Trending**")
        st.markdown(" ".join(badges))
        st.markdown(f"### {destination.name}")
        st.caption(f"📍 {destination.country}")
        st.markdown(f"⭐ **{destination.rating}** ({destination.review_count} reviews)")
        st.markdown(f"**{format_price(destination.price)}** per person")
        if bookable and st.button("Book Now", key=f"{key_prefix}_book_{destination.id}", use_container_width=True):
            booking_dialog(destination)


@st.dialog("Book destination")
def booking_dialog(destination: Destination):
    """Collect dates and travelers for one destination and create a booking."""
    st.markdown(f"#### Book {destination.name}")
    st.caption("Complete your booking details below")

    today = date.today()
    start_date = st.date_input("Start Date", value=None, min_value=today, key="booking_start")
    end_min = start_date + timedelta(days=1) if start_date else today + timedelta(days=1)
    end_date = st.date_input("End Date", value=None, min_value=end_min, key="booking_end")
    travelers = st.number_input(
        "Number of Travelers", min_value=1, max_value=MAX_TRAVELERS, value=1, step=1, key="booking_travelers"
    )

    total = calculate_total_price(start_date, end_date, destination.price, int(travelers))
    summary = [
        ("Price per person", format_price(destination.price)),
        ("Travelers", str(int(travelers))),
    ]
    if start_date and end_date:
        summary.append(("Days", str(trip_days(start_date, end_date))))
    for label, value in summary:
        col_label, col_value = st.columns([2, 1])
        col_label.caption(label)
        col_value.markdown(f"**{value}**")
    st.markdown(f"### 💲 Total Price: {format_price(total)}")

    if st.button(
        "Confirm Booking",
        type="primary",
        disabled=not (start_date and end_date),
        use_container_width=True,
    ):
        service = BookingService(st.session_state.store)
        try:
            with st.spinner("Processing..."):
                service.create_booking(
                    st.session_state.auth.user, destination, start_date, end_date, travelers
                )
        except TravelBookingError as e:
            notify(e)
            return
        st.toast("Booking created successfully!", icon="✅")
        clear_cached_data("bookings")
        st.rerun()


def render_home(store: SupabaseStore):
    st.title("Discover Your Next Adventure")
    st.markdown(
        "Explore breathtaking destinations, plan unforgettable trips, "
        "and create memories that last a lifetime"
    )

    cols = st.columns(len(HOME_STATS))
    for col, (label, value) in zip(cols, HOME_STATS):
        col.metric(label, value)

    st.markdown("---")
    st.header("Featured Destinations")
    st.caption("Discover our handpicked selection of the world's most stunning locations")

    with st.spinner("Loading destinations..."):
        featured = fetch_once("featured", lambda: load_featured_destinations(store))

    if not featured:
        st.info("No destinations available yet.")
        return

    cols = st.columns(len(featured))
    for col, destination in zip(cols, featured):
        with col:
            render_destination_card(destination, "home", bookable=False)
    st.caption("Open the **Destinations** tab to book.")


def render_destinations(store: SupabaseStore):
    st.header("Explore Destinations")
    st.caption("Discover amazing places around the world for your next adventure")

    with st.spinner("Loading destinations..."):
        destinations = fetch_once("destinations", lambda: load_destinations(store))

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        search = st.text_input("Search", placeholder="Search destinations...", key="dest_search")
    with col2:
        country = st.selectbox(
            "Country",
            [ALL] + country_options(destinations),
            format_func=lambda c: "All Countries" if c == ALL else c,
            key="dest_country",
        )
    with col3:
        trip_type = st.selectbox(
            "Trip Type",
            [ALL] + DESTINATION_TYPES,
            format_func=lambda t: "All Types" if t == ALL else t,
            key="dest_type",
        )
    with col4:
        price_range = st.selectbox(
            "Price Range",
            list(PriceRange),
            format_func=lambda p: PRICE_RANGE_LABELS[p],
            key="dest_price",
        )

    filters = DestinationFilters(search=search, country=country, type=trip_type, price_range=price_range)
    filtered = filter_destinations(destinations, filters)

    st.markdown(f"Showing **{len(filtered)}** destinations")

    if not filtered:
        st.info("No destinations found. Try adjusting your filters to see more results.")
        return

    for row_start in range(0, len(filtered), 3):
        cols = st.columns(3)
        for col, destination in zip(cols, filtered[row_start:row_start + 3]):
            with col:
                render_destination_card(destination, "dest")


def parse_activity_time(value: str) -> time | None:
    try:
        return datetime.strptime(value, "%H:%M").time() if value else None
    except ValueError:
        return None


def reset_planner():
    for key in list(st.session_state.keys()):
        if str(key).startswith("planner_") or str(key).startswith("activity_"):
            del st.session_state[key]
    st.session_state.activities.reset()


def render_activities(activities: ActivityList):
    st.subheader("🕑 Daily Activities")
    remove_id = None
    for index, activity in enumerate(list(activities.items)):
        col_name, col_time, col_remove = st.columns([4, 2, 1])
        with col_name:
            name = st.text_input(
                f"Activity {index + 1}",
                value=activity.name,
                placeholder="e.g., Visit Eiffel Tower",
                key=f"activity_name_{activity.id}",
            )
        with col_time:
            picked = st.time_input(
                "Time",
                value=parse_activity_time(activity.time),
                key=f"activity_time_{activity.id}",
            )
        activities.update(activity.id, "name", name)
        activities.update(activity.id, "time", picked.strftime("%H:%M") if picked else "")
        with col_remove:
            if len(activities) > 1 and st.button("🗑️", key=f"activity_remove_{activity.id}"):
                remove_id = activity.id

    if remove_id is not None:
        activities.remove(remove_id)
        st.rerun()

    if st.button("➕ Add Activity", key="activity_add"):
        activities.add()
        st.rerun()


def render_trip_planner(store: SupabaseStore, auth: AuthSession):
    st.header("Plan Your Perfect Trip")
    st.caption("Create a custom itinerary tailored to your preferences and budget")

    st.subheader("📍 Trip Details")
    col1, col2 = st.columns(2)
    with col1:
        destination = st.text_input("Destination", placeholder="Where do you want to go?", key="planner_destination")
    with col2:
        trip_type = st.selectbox(
            "Trip Type",
            [""] + [t.value for t in TripType],
            format_func=lambda t: t.title() if t else "Select trip type",
            key="planner_trip_type",
        )

    col1, col2 = st.columns(2)
    with col1:
        start_date = st.date_input("Start Date", value=None, key="planner_start")
    with col2:
        end_date = st.date_input("End Date", value=None, key="planner_end")

    col1, col2 = st.columns(2)
    with col1:
        travelers = st.text_input("Number of Travelers", value="2", key="planner_travelers")
    with col2:
        budget = st.selectbox(
            "Budget (per person)",
            [""] + [b.value for b in BudgetBucket],
            format_func=lambda b: BUDGET_LABELS[BudgetBucket(b)] if b else "Select budget",
            key="planner_budget",
        )

    render_activities(st.session_state.activities)

    st.subheader("Additional Preferences")
    notes = st.text_area(
        "Special Requests or Notes",
        placeholder="Any dietary restrictions, accessibility needs, or special interests?",
        height=120,
        key="planner_notes",
    )

    if st.button("✈️ Create My Itinerary", type="primary", key="planner_submit"):
        form = TripPlanForm(
            destination=destination,
            trip_type=trip_type,
            start_date=start_date,
            end_date=end_date,
            travelers=travelers,
            budget=budget,
            notes=notes,
        )
        service = TripPlanService(store)
        try:
            with st.spinner("Saving..."):
                service.create_plan(auth.user, form, st.session_state.activities)
        except TravelBookingError as e:
            notify(e)
            return
        st.toast("Trip plan saved successfully!", icon="✅")
        clear_cached_data("trip_plans")
        reset_planner()
        st.rerun()


def render_review_form(store: SupabaseStore, auth: AuthSession):
    destinations = fetch_once("destinations", lambda: load_destinations(store))
    with st.container(border=True):
        st.subheader("💬 Share Your Experience")
        destination_id = st.selectbox(
            "Destination",
            [None] + [d.id for d in destinations],
            format_func=lambda i: "Select a destination" if i is None else next(
                d.display_label() for d in destinations if d.id == i
            ),
            key="review_destination",
        )
        content = st.text_area("Review", placeholder="Tell us about your recent trip...", key="review_content")
        rating = st.select_slider("Rating", options=[1, 2, 3, 4, 5], value=5, format_func=star_bar, key="review_rating")

        if st.button("Post Review", type="primary", key="review_submit"):
            service = ReviewService(store)
            try:
                service.submit_review(auth.user, content, rating, destination_id)
            except TravelBookingError as e:
                notify(e)
                return
            st.toast("Review posted!", icon="✅")
            st.session_state.pop("review_content", None)
            clear_cached_data("reviews")
            st.rerun()


def render_reviews(store: SupabaseStore, auth: AuthSession):
    st.header("Traveler Reviews")
    st.caption("Real stories from real travelers. Share your adventures and inspire others!")

    render_review_form(store, auth)

    service = ReviewService(store)
    with st.spinner("Loading reviews..."):
        reviews = fetch_once("reviews", service.list_reviews)

    selected_type = st.selectbox(
        "Filter by type",
        [ALL] + DESTINATION_TYPES,
        format_func=lambda t: "All Types" if t == ALL else t,
        key="review_filter",
    )
    filtered = filter_reviews(reviews, selected_type)

    if not filtered:
        st.info("No reviews yet.")
        return

    for review in filtered:
        with st.container(border=True):
            col_avatar, col_body = st.columns([1, 8])
            with col_avatar:
                st.markdown(f"### {initials(review.author_name)}")
            with col_body:
                st.markdown(f"**{review.author_name}** · {time_ago(review.created_at)}")
                if review.destinations:
                    st.caption(f"{review.destinations.name} · {review.destinations.type}")
                st.markdown(star_bar(review.rating))
                st.markdown(review.content)
                st.caption(f"👍 {review.likes}")


def render_booking_row(booking):
    with st.container(border=True):
        col_info, col_status = st.columns([4, 1])
        with col_info:
            st.markdown(f"**{booking.destination_name}**")
            st.caption(
                f"📅 {booking.start_date.isoformat()} · "
                f"🕑 {booking_length_days(booking.start_date, booking.end_date)} days · "
                f"👥 {booking.travelers}"
            )
            st.caption(f"Total: {format_price(booking.total_price)}")
        with col_status:
            st.markdown(f"`{booking.status.value.capitalize()}`")


def render_profile(store: SupabaseStore, auth: AuthSession):
    st.header("👤 Profile")
    if not auth.is_authenticated:
        st.info("Sign in from the sidebar to see your trips.")
        return

    user = auth.user
    st.markdown(f"### {initials(user.label)} · {user.label}")

    with st.spinner("Loading your trips..."):
        bookings = fetch_once("bookings", lambda: load_bookings(store, user.id))
        plans = fetch_once("trip_plans", lambda: TripPlanService(store).list_plans(user))

    today = date.today()
    stats = ProfileStats.from_bookings(bookings, today)
    cols = st.columns(4)
    cols[0].metric("Trips Completed", stats.trips_completed)
    cols[1].metric("Upcoming Trips", stats.upcoming_trips)
    cols[2].metric("Pending Bookings", stats.pending_bookings)
    cols[3].metric("Destinations Booked", len(stats.destinations_booked))

    upcoming_tab, pending_tab, past_tab, plans_tab = st.tabs(
        ["Upcoming Trips", "Pending", "Past Trips", "Trip Plans"]
    )
    with upcoming_tab:
        upcoming = upcoming_trips(bookings, today)
        if not upcoming:
            st.info("No upcoming trips. Plan a trip in the Trip Planner tab.")
        for booking in upcoming:
            render_booking_row(booking)
    with pending_tab:
        pending = pending_bookings(bookings)
        if not pending:
            st.info("No bookings awaiting confirmation.")
        for booking in pending:
            render_booking_row(booking)
    with past_tab:
        past = past_trips(bookings, today)
        if not past:
            st.info("No past trips yet.")
        for booking in past:
            render_booking_row(booking)
    with plans_tab:
        if not plans:
            st.info("No saved trip plans yet.")
        for plan in plans:
            with st.expander(f"{plan.destination} · {plan.start_date.isoformat()} → {plan.end_date.isoformat()}"):
                st.markdown(
                    f"**Type:** {plan.trip_type.value.title()} · **Travelers:** {plan.travelers} · "
                    f"**Budget:** {plan.budget_label}"
                )
                for activity in plan.activities:
                    st.markdown(f"- {activity.time or '--:--'} {activity.name}")
                if plan.notes:
                    st.caption(plan.notes)


def render_settings():
    """Render the backend connection settings."""
    st.header("⚙️ Settings")
    st.subheader("Backend")

    url = st.text_input("Supabase URL", value=get_setting("SUPABASE_URL"), key="settings_url")
    key = st.text_input("Supabase anon key", value=get_setting("SUPABASE_KEY"), type="password", key="settings_key")

    if LOCAL_MODE:
        col1, col2 = st.columns(2)
        with col1:
            if st.button("💾 Save", key="settings_save", use_container_width=True):
                if save_setting("SUPABASE_URL", url) and save_setting("SUPABASE_KEY", key):
                    st.success("Saved to keyring!")
                else:
                    st.error("Failed to save")
        with col2:
            if st.button("🗑️ Delete", key="settings_delete", use_container_width=True):
                delete_setting("SUPABASE_URL")
                delete_setting("SUPABASE_KEY")
                st.success("Deleted!")
                st.rerun()
    else:
        st.caption("Values entered here last for this browser session only")

    if st.button("Connect", key="settings_connect", type="primary"):
        st.session_state.backend_credentials = (url, key)
        if connect_backend():
            st.rerun()
        else:
            st.error(st.session_state.config_error)


def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    tabs = st.tabs(["🏠 Home", "🌍 Destinations", "🗺️ Trip Planner", "💬 Reviews", "👤 Profile", "⚙️ Settings"])
    store = st.session_state.store
    auth = st.session_state.auth

    with tabs[5]:
        render_settings()

    if store is None:
        for tab in tabs[:5]:
            with tab:
                st.warning("⚠️ No backend configured. Go to the **Settings** tab to connect.")
        return

    with tabs[0]:
        render_home(store)
    with tabs[1]:
        render_destinations(store)
    with tabs[2]:
        render_trip_planner(store, auth)
    with tabs[3]:
        render_reviews(store, auth)
    with tabs[4]:
        render_profile(store, auth)


if __name__ == "__main__":
    main()
