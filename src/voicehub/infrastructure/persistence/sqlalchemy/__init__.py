"""SQLAlchemy persistence shared by all VoiceHub packages."""
