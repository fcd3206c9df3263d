"""
Centralized UI messages.
All user-facing text in one place for consistency.
"""

MESSAGES = {
    # Success messages
    'reservation_created': 'Reservation created successfully!',
    'reservation_cancelled': 'Reservation cancelled',
    'reservation_completed': 'Reservation completed',
    'reservation_cleaning': 'Room marked for cleaning',
    'application_submitted': 'Application submitted successfully!',
    'application_status_updated': 'Application status updated',
    'registration_submitted': 'User registered successfully!',
    'draft_saved': 'Draft saved',
    'draft_discarded': 'Draft discarded',
    'class_created': 'Class created successfully!',
    'class_updated': 'Class updated successfully!',
    'class_deleted': 'Class deleted successfully!',
    'materials_added': '{count} file(s) uploaded successfully!',
    'material_removed': 'Material removed',
    'schedule_created': 'Class scheduled successfully!',
    'schedule_updated': 'Scheduled class updated successfully!',
    'schedule_deleted': 'Scheduled class deleted successfully!',
    'participants_saved': '{count} participant(s) added successfully!',
    'participant_removed': 'Participant removed',
    'profile_created': 'Profile created successfully!',
    'profile_updated': 'Profile updated successfully!',
    'profile_deleted': 'Profile deleted',
    'user_created': 'User created successfully',
    'user_updated': 'User updated successfully',
    'user_deleted': 'User deleted successfully',
    'role_created': 'Role created successfully',
    'role_updated': 'Role updated successfully',
    'role_deleted': 'Role deleted successfully',
    'permission_toggled': 'Permission updated',

    # Error messages
    'validation_failed': 'Please correct the highlighted fields',
    'json_required': 'A JSON body is required',
    'invalid_step': 'Unknown form step',
    'invalid_status': 'Invalid status',
    'invalid_filter': 'Invalid filter value',
    'application_not_found': 'Application not found',
    'registration_not_found': 'Registration not found',
    'profile_not_found': 'Profile not found',
    'profile_read_only': 'Application and registration profiles cannot be changed here',
    'class_not_found': 'Selected class not found',
    'class_has_schedules': 'Class cannot be deleted while it is scheduled',
    'material_not_found': 'Material not found',
    'schedule_not_found': 'Scheduled class not found',
    'roster_full': 'Cannot add more than {max} participants',
    'roster_exceeds_capacity': 'Max attendees cannot be lower than the current roster ({count})',
    'participant_not_found': 'Participant not found',
    'user_not_found': 'User not found',
    'username_exists': 'Username already exists',
    'email_exists': 'Email already exists',
    'role_not_found': 'Role not found',
    'role_required': 'Role name is required',
    'role_name_exists': 'A role with this name already exists',
    'role_has_users': 'Role cannot be deleted while users are assigned to it',
    'unknown_permission': 'Unknown module, section or action',
    'not_found': 'Resource not found',
    'method_not_allowed': 'Method not allowed',
    'internal_error': 'Internal server error',
}
