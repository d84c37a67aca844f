"""
cli - AppConfig Poller 명령줄 인터페이스

    app.py      Click 명령 (옵션, 로깅 설정, SIGTERM 처리)
    runner.py   파이프라인 실행 및 최상위 에러 처리
    i18n/       메시지 번역 (ko/en)
"""
