"""
Service layer

Peripheral pipelines built around the RSVP data, no registry state here:
- csv_loader: read the CSV inputs into typed rows
- report_service: join the rows and render the attendance report
"""
